"""Level-filtering logger wrapper used by the transports."""

from __future__ import annotations

import logging
from typing import Any, Literal

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

DEFAULT_LOGGER_NAME = "thrifty_http"

# Minimum-level names accepted by BoundLogger, lowest first
_LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class BoundLogger:
    """Sends trace/debug/warn records to a logging.Logger or a duck-typed logger.

    Records below ``level`` are dropped before reaching the target. Errors
    raised by the target are swallowed so a broken log sink never fails a
    transport call.
    """

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        self._logger = logger or _default_logger()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def trace(self, msg: str, *args: Any) -> None:
        self._emit("trace", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._emit("debug", msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._emit("warn", msg, args)

    def child(self, name: str) -> "BoundLogger":
        """Return a logger for ``<name>`` under the same target and level."""
        target = self._logger
        if isinstance(target, logging.Logger):
            target = target.getChild(name)
        return BoundLogger(target, level=self._level)

    def _emit(self, level: LogLevel, msg: str, args: tuple[Any, ...]) -> None:
        numeric = _LEVELS[level]
        if numeric < _LEVELS[self._level]:
            return
        try:
            if hasattr(self._logger, "log"):
                self._logger.log(numeric, msg, *args)
            else:
                method = getattr(self._logger, level, None)
                if method is not None:
                    method(msg, *args)
        except Exception:
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LogLevel", "TRACE_LEVEL", "create_logger"]
