"""Settings of a root logger, from arguments, a YAML section or the environment."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def _level(value: str | int | bool) -> int | bool:
    # True keeps the default level, False turns logging off
    if isinstance(value, bool):
        return logging.INFO if value else False
    if isinstance(value, int):
        return value
    key = value.lower()
    if key.isnumeric():
        return int(key)
    try:
        return LogConstants.LEVEL_NAMES[key]
    except KeyError:
        raise InvalidLogLevelError(value) from None


@dataclass(frozen=True)
class LogConfig:
    """
    Level and display settings of a root logger.

    ``level`` is a logging level number or False when logging is off.
    Derived loggers copy only the level; how records look is decided by the
    root's handler.
    """

    level: int | bool = logging.INFO
    micros: bool = False
    colors: bool = True

    @classmethod
    def from_params(
        cls, level: str | int | bool, micros: bool = False, colors: bool = True
    ) -> LogConfig:
        """Build from a level name ("debug", "trace2", "false"), number or bool."""
        return cls(_level(level), micros, colors)

    @classmethod
    def from_env(cls, default: str = "info") -> LogConfig:
        """
        Build from TFDOCS_LOG_LEVEL for the command line entry points.

        Colors stay off when NO_COLOR is set or stderr is not a terminal.
        """
        level = os.environ.get(LogConstants.LEVEL_ENV_VAR, default)
        colors = sys.stderr.isatty() and not os.environ.get("NO_COLOR")
        return cls.from_params(level, colors=colors)
