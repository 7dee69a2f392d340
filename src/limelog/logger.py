"""Severity-routing logger.

Every record carries the fixed :data:`TAG`. The module-level :func:`info`,
:func:`warning` and :func:`severe` write through one process-wide
:class:`Logger`; hosts pick its sink once at start-up with :func:`install_sink`,
:func:`set_log_file` or :func:`configure`.
"""

from __future__ import annotations

from pathlib import Path
import sys
import threading
from typing import Callable

from .config import LogConfig
from .log_sink import FileLogSink, LogSink, PlatformLogSink, Severity

TAG = "Moonlight"


class Logger:
    """Write tagged records to a :class:`~limelog.log_sink.LogSink`.

    Calls never raise: a failing sink is reported on standard error and the
    call returns normally.

    :param sink: Target sink.
    """

    def __init__(self, sink: LogSink) -> None:
        self._sink = sink

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def tag(self) -> str:
        return TAG

    def info(self, message: str) -> None:
        """Write an informational message.

        :param message: Message text.
        """
        self._emit(Severity.INFO, message)

    def warning(self, message: str) -> None:
        """Write a warning message.

        :param message: Message text.
        """
        self._emit(Severity.WARNING, message)

    def severe(self, message: str) -> None:
        """Write an error-level message.

        :param message: Message text.
        """
        self._emit(Severity.SEVERE, message)

    def _emit(self, severity: Severity, message: str) -> None:
        try:
            self._sink.write(severity, TAG, message)
        except Exception as ex:
            try:
                print(f"limelog: sink failure: {ex}", file=sys.stderr)
            except Exception:
                pass


_default = Logger(PlatformLogSink())
_install_gate = threading.Lock()


def get_sink() -> LogSink:
    """Return the sink used by the module-level functions."""
    return _default.sink


def install_sink(sink: LogSink) -> Callable[[], None]:
    """Route the module-level functions to ``sink``.

    :param sink: Sink implementation.
    :returns: A callback that restores the previously installed sink.
    """
    global _default

    with _install_gate:
        previous = _default.sink
        _default = Logger(sink)

    def reset() -> None:
        install_sink(previous)

    return reset


def set_log_file(path: Path) -> FileLogSink:
    """Append all further records to ``path``.

    :param path: Log file path; parent folders are created on first write.
    :returns: The installed file sink.
    """
    sink = FileLogSink(path)
    install_sink(sink)
    return sink


def configure(config: LogConfig) -> LogSink:
    """Install the sink described by ``config``.

    :param config: Sink selection.
    :returns: The installed sink.
    """
    sink = config.build_sink()
    install_sink(sink)
    return sink


def info(message: str) -> None:
    """Write an informational message through the installed sink.

    :param message: Message text.
    """
    _default.info(message)


def warning(message: str) -> None:
    """Write a warning message through the installed sink.

    :param message: Message text.
    """
    _default.warning(message)


def severe(message: str) -> None:
    """Write an error-level message through the installed sink.

    :param message: Message text.
    """
    _default.severe(message)
