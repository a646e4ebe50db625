"""
Log formatter for console output.

Renders records as::

    [12:34:56,789] [I] wrote page                      [path:docs/formats/json.md] [/docs]

with the level color applied to the timestamp, level and message when
colors are enabled.
"""

import logging
import re
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .logger import FIELDS_ATTR

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def _visual_len(text: str) -> int:
    """Calculate visual width of text, excluding ANSI escape codes."""
    if "\x1b" not in text:
        return len(text)
    return len(_ANSI_PATTERN.sub("", text))


def _format_value(value: Any) -> str:
    if isinstance(value, BaseException):
        return f"{value.__class__.__name__}: {value}"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


class LogFormatter(logging.Formatter):
    """
    Console formatter with structured field rendering.

    Extra fields are sorted by key and shown as ``[key:value]`` after the
    message, padded to a fixed rule so they line up. Exceptions passed as
    the ``exception`` field render as ``Type: message``.
    """

    def __init__(self, config: LogConfig):
        self._config = config
        super().__init__(LogConstants.DEFAULT_FORMAT)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp, optionally with microsecond precision."""
        s = super().formatTime(record, "%H:%M:%S")
        s += f",{int(record.msecs):03d}"
        if self._config.micros:
            s += f".{int((record.created % 1) * 1_000_000) % 1000:03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        record.asctime = self.formatTime(record)
        level = record.levelname[:1]

        head = f"[{record.asctime}] [{level}] {record.message}"
        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        pad = " " * max(1, rule - _visual_len(head))

        extra = getattr(record, FIELDS_ATTR, None) or {}
        fields = [f"[{k}:{_format_value(extra[k])}]" for k in sorted(extra)]
        tail = " ".join(fields + [f"[{record.name}]"])

        if not self._config.colors:
            line = head + pad + tail
        else:
            col = ColorManager.get_color_for_level(record.levelno)
            col = col or ColorManager.DEFAULT
            gray = ColorManager.create_gray_level(9) + "m"
            line = (
                ColorManager.paint(head, col)
                + pad
                + gray
                + tail
                + ColorManager.RESET
            )

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
