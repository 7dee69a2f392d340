"""Public exports for :mod:`limelog`.

This package is a thin logging facade: :func:`info`, :func:`warning` and
:func:`severe` forward each message, tagged with :data:`TAG`, to one installed sink.
Most runtime behavior is implemented in :mod:`limelog.logger`.
"""

from .config import LogConfig, default_log_path
from .log_sink import (
    FileLogSink,
    LogEntry,
    LogSink,
    MemoryLogSink,
    PlatformLogSink,
    Severity,
    StreamLogSink,
)
from .logger import (
    TAG,
    Logger,
    configure,
    get_sink,
    info,
    install_sink,
    set_log_file,
    severe,
    warning,
)

__all__ = [
    "FileLogSink",
    "LogConfig",
    "LogEntry",
    "LogSink",
    "Logger",
    "MemoryLogSink",
    "PlatformLogSink",
    "Severity",
    "StreamLogSink",
    "TAG",
    "configure",
    "default_log_path",
    "get_sink",
    "info",
    "install_sink",
    "set_log_file",
    "severe",
    "warning",
]
