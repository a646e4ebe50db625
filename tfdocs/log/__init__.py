"""
Logging for tfdocs, built on the standard logging module.

Adds:
- TRACE and TRACE2 levels below DEBUG
- Structured extra fields rendered after the message
- Colored console output (disabled with NO_COLOR or on non-TTY stderr)
- Derived "view" loggers sharing the root's handlers

Log level is taken from TFDOCS_LOG_LEVEL by the entry points; "false"
disables logging entirely.
"""

import logging

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")
logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE2"], "TRACE2")

LogConstants.LEVEL_NAMES.update(
    {
        "trace": LogConstants.CUSTOM_LEVELS["TRACE"],
        "trace2": LogConstants.CUSTOM_LEVELS["TRACE2"],
    }
)

ColorManager.add_custom_level_colors()


__all__ = [
    "ColorManager",
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
