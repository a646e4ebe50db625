"""Logger with trace levels and per-record fields."""

import logging
import sys
from typing import Any

from .config import LogConfig
from .constants import LogConstants

# Record attribute holding the fields rendered after the message
FIELDS_ATTR = "__tfdocs__extra"


class Logger(logging.Logger):
    """
    Logger used throughout tfdocs.

    Fields given with ``extra={...}`` are merged over the logger's own
    fields and stored on the record under FIELDS_ATTR instead of being
    spread onto it, so names like ``path`` or ``name`` never clash with
    LogRecord attributes.

    A logger created by LoggerFactory.derive has no handlers; it hands its
    records to the root it was derived from.
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        config = config or LogConfig()
        off = config.level is False
        super().__init__(name, logging.CRITICAL + 1 if off else config.level)
        self._config = config
        self._off = off
        self._fields = dict(extra or {})
        self._root_logger: Logger | None = None

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def disabled(self) -> bool:
        return self._off

    @disabled.setter
    def disabled(self, value: bool) -> None:
        # logging.Logger.__init__ assigns this before _config exists
        self._off = value

    def isEnabledFor(self, level: int) -> bool:
        if self._off or not super().isEnabledFor(level):
            return False
        parent = self.parent
        if isinstance(parent, Logger):
            return parent.isEnabledFor(level)
        return True

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: str,
        args: tuple,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, None, sinfo
        )
        setattr(record, FIELDS_ATTR, {**self._fields, **(extra or {})})
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log below DEBUG, for per-command detail of a docs run."""
        self._custom("TRACE", msg, args, kwargs)

    def trace2(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at the most verbose level, for logger plumbing itself."""
        self._custom("TRACE2", msg, args, kwargs)

    def _custom(self, level_name: str, msg: str, args: tuple, kwargs: dict) -> None:
        level = LogConstants.CUSTOM_LEVELS[level_name]
        if self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)

    def _log(  # type: ignore[override]
        self, level: int, msg: str, args: tuple, **kwargs: Any
    ) -> None:
        if self._off:
            return
        try:
            super()._log(level, msg, args, **kwargs)
        except (TypeError, ValueError) as e:
            # A bad %-format in a log call must not abort page generation
            sys.stderr.write(
                f"LOG_FORMAT_ERROR [{self.name}]: {type(e).__name__}: {e} "
                f"| msg={msg[:80]!r} args={args!r}\n"
            )

    def callHandlers(self, record: logging.LogRecord) -> None:
        target = self._root_logger
        if target is None:
            super().callHandlers(record)
            return
        for handler in target.handlers:
            if record.levelno >= handler.level:
                handler.handle(record)
