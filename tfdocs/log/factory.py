"""
Factory for creating and configuring loggers.

Root loggers own a stderr handler; derived loggers are lightweight views
that reuse the root's handlers under a longer, slash-separated name.
"""

import logging
import sys
from typing import Any, TextIO, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create the root logger ("/") with the specified configuration.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("generating docs")
            [12:34:56,789] [I] generating docs                       [/]
        """
        return LoggerFactory.create("/", config, stream=stream)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        stream: TextIO | None = None,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Create a logger with its own console handler.

        Returns the already registered logger when one exists under ``name``.

        Args:
            name: Logger name
            config: Logger configuration
            stream: Output stream (default: sys.stderr)
            extra: Pre-populated extra fields included in all records
        """
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing

        lg = Logger(name, config, extra)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(logging.NOTSET if config.level is False else config.level)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        logging.root.manager.loggerDict[name] = lg
        lg.trace2(
            "created logger",
            extra={"level": logging.getLevelName(lg.level), "micros": config.micros},
        )
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to the root's handlers.

        Examples:
            >>> derived = LoggerFactory.derive(root, "docs")
            >>> derived.name
            '/docs'
            >>> LoggerFactory.derive(root, ["docs", "walker"]).name
            '/docs/walker'

        Args:
            parent: Parent logger instance
            tags: Single tag string OR list of tag strings to form hierarchy
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        name = prefix + "/".join(tags)

        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing

        root = parent._root_logger or parent
        lg = parent.__class__(name, LogConfig(level=parent.config.level))
        lg.setLevel(logging.NOTSET)
        lg._root_logger = root
        lg.parent = parent
        lg.propagate = False

        logging.root.manager.loggerDict[name] = lg
        lg.trace2("derived logger", extra={"root": root.name})
        return cast(Logger, lg)
