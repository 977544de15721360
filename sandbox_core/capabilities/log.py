"""Log service backed by the standard :mod:`logging` package."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any

from sandbox_core.events import EventBus, EventStream

LOG_LEVEL_CHANGED_EVENT = "log.level_changed"
TRACE = 5

logging.addLevelName(TRACE, "TRACE")


class LogLevel(IntEnum):
    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    OFF = logging.CRITICAL + 10

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        name = value.strip().upper()
        if name == "WARN":
            name = "WARNING"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"unknown log level {value!r}") from None


class LogService(ABC):
    @property
    @abstractmethod
    def on_did_change_log_level(self) -> EventStream: ...

    @abstractmethod
    def get_level(self) -> LogLevel: ...

    @abstractmethod
    def set_level(self, level: LogLevel) -> None: ...

    @abstractmethod
    def trace(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def error(self, message: str | BaseException, *args: Any) -> None: ...

    @abstractmethod
    def critical(self, message: str | BaseException, *args: Any) -> None: ...

    @abstractmethod
    def flush(self) -> None: ...


class SandboxLogService(LogService):
    """Console logger; the only stand-in that carries mutable state (its level).

    The level is held per instance. Records that pass it are handed straight
    to the underlying logger's handlers, so several services can share one
    :class:`logging.Logger` without changing its configured level.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        *,
        logger: logging.Logger | None = None,
        events: EventBus | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("sandbox_core.console")
        self._events = events or EventBus()
        self._level = level

    @property
    def on_did_change_log_level(self) -> EventStream:
        return self._events.stream(LOG_LEVEL_CHANGED_EVENT)

    def get_level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        if level == self._level:
            return
        self._level = level
        self._events.emit(LOG_LEVEL_CHANGED_EVENT, {"level": level})

    def trace(self, message: str, *args: Any) -> None:
        self._log(LogLevel.TRACE, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, message, args)

    def error(self, message: str | BaseException, *args: Any) -> None:
        self._log(LogLevel.ERROR, message, args)

    def critical(self, message: str | BaseException, *args: Any) -> None:
        self._log(LogLevel.CRITICAL, message, args)

    def flush(self) -> None:
        for handler in self._logger.handlers:
            handler.flush()

    def _log(self, level: LogLevel, message: str | BaseException, args: tuple[Any, ...]) -> None:
        if level < self._level:
            return
        exc_info = None
        if isinstance(message, BaseException):
            exc_info = (type(message), message, message.__traceback__)
            message, args = str(message), ()
        record = self._logger.makeRecord(
            self._logger.name, int(level), "(sandbox)", 0, message, args, exc_info
        )
        self._logger.handle(record)
