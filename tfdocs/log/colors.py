"""
ANSI colors shared by the log formatter and the pretty formatter.

Colors are kept as unterminated escape prefixes (``"\\x1b[36"``) so the
bold variant is the same prefix plus ``";1m"``.
"""

import logging

from .constants import LogConstants


def _xterm(code: int) -> str:
    return f"\x1b[38;5;{code}"


class ColorManager:
    """Palette and helpers; all members are class level."""

    RED = "\x1b[31"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        logging.DEBUG: _xterm(32),
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @classmethod
    def get_color_for_level(cls, level: int) -> str | None:
        return cls.COLORS.get(level)

    @staticmethod
    def create_gray_level(level: int) -> str:
        """Gray from the xterm ramp; 0 is near black, 23 near white."""
        level = max(0, min(level, LogConstants.GRAY_MAX_LEVELS - 1))
        return _xterm(LogConstants.GRAY_BASE + level)

    @classmethod
    def paint(cls, text: str, color: str, bold: bool = False) -> str:
        """Wrap text in ``color`` (a prefix such as CYAN) and a reset."""
        return f"{color}{';1m' if bold else 'm'}{text}{cls.RESET}"

    @classmethod
    def add_custom_level_colors(cls) -> None:
        """Give TRACE and TRACE2 their colors once the levels are registered."""
        levels = LogConstants.CUSTOM_LEVELS
        cls.COLORS[levels["TRACE"]] = _xterm(24)
        cls.COLORS[levels["TRACE2"]] = cls.create_gray_level(7)
