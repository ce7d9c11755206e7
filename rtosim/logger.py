"""Thread-safe console and file logger with a process-wide default instance."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity of a log message; higher values are more severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


def _timestamp() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


class Logger:
    """Writes timestamped messages to a stream and optionally to a file."""

    def __init__(self, stream: TextIO | None = None, level: LogLevel = LogLevel.DEBUG) -> None:
        self._stream = stream
        self._level = LogLevel(level)
        self._lock = threading.Lock()
        self._file: TextIO | None = None

    @property
    def level(self) -> LogLevel:
        """The minimum level that is logged."""
        return self._level

    @property
    def file_logging_enabled(self) -> bool:
        """Whether messages are also written to a file."""
        return self._file is not None

    def set_log_level(self, level: LogLevel) -> None:
        """Log only messages at or above ``level``."""
        with self._lock:
            self._level = LogLevel(level)

    def set_log_file(self, filename) -> None:
        """Also append every logged message to ``filename``.

        Raises OSError if the file cannot be opened.
        """
        handle = open(filename, "a", encoding="utf-8")
        with self._lock:
            if self._file is not None:
                self._file.close()
            self._file = handle

    def log(self, level: LogLevel, message: str) -> None:
        """Log ``message`` at ``level`` if it meets the current threshold."""
        level = LogLevel(level)
        if level < self._level:
            return
        with self._lock:
            line = f"{_timestamp()} [{level.name}] {message}"
            stream = sys.stdout if self._stream is None else self._stream
            print(line, file=stream, flush=True)
            if self._file is not None:
                self._file.write(line + "\n")
                self._file.flush()

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def close(self) -> None:
        """Stop file logging and close the log file."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _default_logger