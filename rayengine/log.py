"""Engine and client loggers that share a console sink and a log file."""

from __future__ import annotations

import logging
import os
import sys
from typing import ClassVar

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}

_LEVEL_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}
_RESET = "\033[0m"

_CONSOLE_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_FILE_FORMAT = "[%(asctime)s] [%(short_level)s] %(name)s: %(message)s"
_TIME_FORMAT = "%H:%M:%S"

DEFAULT_LOG_FILE = "RayEngine.log"


class _EngineLogger(logging.Logger):
    """A logger with an extra ``trace`` level below ``debug``."""

    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)


class _LevelFormatter(logging.Formatter):
    """Formatter exposing lower-case level names as ``short_level``."""

    def format(self, record: logging.LogRecord) -> str:
        record.short_level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        return super().format(record)


class _ColorFormatter(_LevelFormatter):
    """Wraps each line in the level's colour when writing to a terminal."""

    def __init__(self, fmt: str, datefmt: str, use_color: bool) -> None:
        super().__init__(fmt, datefmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._use_color:
            return text
        color = _LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{text}{_RESET}" if color else text


class Log:
    """Holds the engine's core logger and the client application's logger."""

    _core: ClassVar[_EngineLogger | None] = None
    _client: ClassVar[_EngineLogger | None] = None
    _handlers: ClassVar[list[logging.Handler]] = []

    @classmethod
    def initialize(cls, log_path: str | os.PathLike = DEFAULT_LOG_FILE) -> None:
        """Create both loggers; the log file is truncated on every call."""
        cls._close()

        stream = sys.stdout
        console = logging.StreamHandler(stream)
        isatty = getattr(stream, "isatty", None)
        console.setFormatter(
            _ColorFormatter(_CONSOLE_FORMAT, _TIME_FORMAT, bool(isatty and isatty()))
        )
        file_handler = logging.FileHandler(os.fspath(log_path), mode="w", encoding="utf-8")
        file_handler.setFormatter(_LevelFormatter(_FILE_FORMAT, _TIME_FORMAT))
        cls._handlers = [console, file_handler]

        cls._core = cls._make_logger("RAYENGINE")
        cls._client = cls._make_logger("APP")

    @classmethod
    def core_logger(cls) -> _EngineLogger:
        """The logger used by the engine itself."""
        if cls._core is None:
            raise RuntimeError("Log.initialize() has not been called")
        return cls._core

    @classmethod
    def client_logger(cls) -> _EngineLogger:
        """The logger used by client applications."""
        if cls._client is None:
            raise RuntimeError("Log.initialize() has not been called")
        return cls._client

    @classmethod
    def _make_logger(cls, name: str) -> _EngineLogger:
        logger = _EngineLogger(name, TRACE)
        logger.propagate = False
        for handler in cls._handlers:
            logger.addHandler(handler)
        return logger

    @classmethod
    def _close(cls) -> None:
        for handler in cls._handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()
        cls._handlers = []
        cls._core = None
        cls._client = None