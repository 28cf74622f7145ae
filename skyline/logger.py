"""Thread-safe leveled logging to standard output and standard error."""

from __future__ import annotations

import inspect
import os
import sys
import threading
from datetime import datetime
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Log severity levels in increasing order."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    def __str__(self) -> str:
        return self.name


_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class Logger:
    """Writes messages at or above the configured level.

    Debug, info and warning messages go to ``out`` (standard output by
    default); error messages go to ``err`` (standard error by default).
    """

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self._out = out
        self._err = err
        self._level = LogLevel(level)
        self._lock = threading.Lock()

    @property
    def level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        """Change the minimum severity that gets written."""
        with self._lock:
            self._level = LogLevel(level)

    def debug(self, message: str, *args: object) -> None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        location = ""
        if caller is not None:
            location = f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
        self._log(LogLevel.DEBUG, message, args, location)

    def info(self, message: str, *args: object) -> None:
        self._log(LogLevel.INFO, message, args)

    def warning(self, message: str, *args: object) -> None:
        self._log(LogLevel.WARNING, message, args)

    def error(self, message: str, *args: object) -> None:
        self._log(LogLevel.ERROR, message, args)

    def _log(
        self,
        level: LogLevel,
        message: str,
        args: tuple[object, ...],
        location: str = "",
    ) -> None:
        with self._lock:
            if self._level > level:
                return
            text = message % args if args else message
            stamp = datetime.now().strftime(_TIMESTAMP_FORMAT)
            if level is LogLevel.DEBUG:
                line = f"DEBUG: {stamp} {location}: {text}"
            elif level is LogLevel.INFO:
                line = text
            elif level is LogLevel.WARNING:
                line = f"WARNING: {stamp} {text}"
            else:
                line = f"ERROR: {stamp} {text}"
            if level is LogLevel.ERROR:
                stream = self._err if self._err is not None else sys.stderr
            else:
                stream = self._out if self._out is not None else sys.stdout
            if not line.endswith("\n"):
                line += "\n"
            stream.write(line)
            stream.flush()


_instance: Logger | None = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process-wide logger, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Logger()
        return _instance