"""Log sinks.

This module provides the minimal sink interface used by :class:`~limelog.logger.Logger`
and a handful of concrete sinks a host application can install: the standard
:mod:`logging` module, a text stream, a file, and an in-memory list.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
import logging
from pathlib import Path
import sys
import threading
from typing import Callable, NamedTuple, TextIO


class Severity(str, Enum):
    """Severity of a log record; one per facade operation."""

    INFO = "info"
    WARNING = "warning"
    SEVERE = "severe"

    @property
    def label(self) -> str:
        """Level text used in file lines (``INFO``, ``WARN``, ``ERROR``)."""
        return _LABELS[self]

    @property
    def letter(self) -> str:
        """Single-letter priority (``I``, ``W``, ``E``)."""
        return _LABELS[self][0]

    @property
    def level(self) -> int:
        """Matching :mod:`logging` level."""
        return _LEVELS[self]


_LABELS = {
    Severity.INFO: "INFO",
    Severity.WARNING: "WARN",
    Severity.SEVERE: "ERROR",
}

_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.SEVERE: logging.ERROR,
}


class LogEntry(NamedTuple):
    severity: Severity
    tag: str
    message: str


class LogSink:
    """Abstract sink used by :class:`~limelog.logger.Logger`."""

    def write(self, severity: Severity, tag: str, message: str) -> None:
        """Write a log record.

        :param severity: Record severity.
        :param tag: Identifying tag of the emitting application.
        :param message: Log message.
        """
        raise NotImplementedError("Provide a sink implementation.")


class PlatformLogSink(LogSink):
    """Forward records to the standard :mod:`logging` module.

    Each record goes to the logger named after its tag. Filtering and formatting
    are whatever the host has configured on that logger and its handlers.

    :param get_logger: Logger lookup, :func:`logging.getLogger` by default.
    """

    def __init__(self, get_logger: Callable[[str], logging.Logger] = logging.getLogger) -> None:
        self._get_logger = get_logger

    def write(self, severity: Severity, tag: str, message: str) -> None:
        # No args, so the logging module never %-formats the message.
        self._get_logger(tag).log(severity.level, message)


class StreamLogSink(LogSink):
    """Write ``W/tag: message`` lines to a text stream.

    :param stream: Target stream. ``None`` resolves :data:`sys.stderr` on every write.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, severity: Severity, tag: str, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        with self._lock:
            stream.write(f"{severity.letter}/{tag}: {message}\n")
            stream.flush()


class FileLogSink(LogSink):
    """Thread-safe file sink.

    :param path: File path to append logs to.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def write(self, severity: Severity, tag: str, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] {severity.label}/{tag}: {message}"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")


class MemoryLogSink(LogSink):
    """Keep records in memory, in arrival order."""

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()

    def write(self, severity: Severity, tag: str, message: str) -> None:
        with self._lock:
            self._entries.append(LogEntry(severity, tag, message))

    def entries(self) -> list[LogEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
