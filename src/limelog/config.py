"""Configuration helpers.

:class:`LogConfig` is a small immutable object describing which single sink the
default logger should use. :func:`~limelog.logger.configure` turns it into a sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import os
from pathlib import Path
from typing import Mapping

from .log_sink import FileLogSink, LogSink, PlatformLogSink, StreamLogSink

_TRUTHY = {"1", "true", "yes", "on"}


def default_log_path(directory: Path) -> Path:
    """Return a timestamped log path inside ``directory``.

    :param directory: Folder the log file should live in.
    :returns: A path like ``limelog_YYYYMMDD_HHMMSS.log``.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(directory) / f"limelog_{timestamp}.log"


@dataclass(frozen=True)
class LogConfig:
    """Sink selection for the default logger.

    :param log_path: Append records to this file when set.
    :param use_stderr: Write records to standard error when no ``log_path`` is set.
    """
    log_path: Path | None = None
    use_stderr: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LogConfig":
        """Read ``LIMELOG_FILE`` and ``LIMELOG_STDERR``.

        :param environ: Mapping to read from; defaults to :data:`os.environ`.
        :returns: A configuration instance.
        """
        env = os.environ if environ is None else environ
        raw_path = env.get("LIMELOG_FILE", "").strip()
        raw_stderr = env.get("LIMELOG_STDERR", "")
        return cls(
            log_path=Path(raw_path).expanduser() if raw_path else None,
            use_stderr=raw_stderr.strip().lower() in _TRUTHY,
        )

    def build_sink(self) -> LogSink:
        """Create the single sink this config selects.

        :returns: A file sink when ``log_path`` is set, else a stderr stream sink when
            ``use_stderr`` is set, else the platform logging sink.
        """
        if self.log_path is not None:
            return FileLogSink(self.log_path)
        if self.use_stderr:
            return StreamLogSink()
        return PlatformLogSink()
