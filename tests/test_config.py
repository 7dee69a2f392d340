from __future__ import annotations

from pathlib import Path
import re

import pytest

from limelog import (
    FileLogSink,
    LogConfig,
    PlatformLogSink,
    StreamLogSink,
    default_log_path,
)


def test_defaults_select_platform_sink() -> None:
    config = LogConfig()

    assert config.log_path is None
    assert config.use_stderr is False
    assert isinstance(config.build_sink(), PlatformLogSink)


def test_log_path_wins_over_stderr(tmp_path: Path) -> None:
    sink = LogConfig(log_path=tmp_path / "a.log", use_stderr=True).build_sink()

    assert isinstance(sink, FileLogSink)
    assert sink.path == tmp_path / "a.log"


def test_stderr_selects_stream_sink() -> None:
    assert isinstance(LogConfig(use_stderr=True).build_sink(), StreamLogSink)


def test_from_env_empty() -> None:
    assert LogConfig.from_env({}) == LogConfig()


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("", False)])
def test_from_env_stderr_flag(raw: str, expected: bool) -> None:
    assert LogConfig.from_env({"LIMELOG_STDERR": raw}).use_stderr is expected


def test_from_env_file(tmp_path: Path) -> None:
    config = LogConfig.from_env({"LIMELOG_FILE": str(tmp_path / "m.log")})

    assert config.log_path == tmp_path / "m.log"


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LIMELOG_FILE", raising=False)
    monkeypatch.setenv("LIMELOG_STDERR", "yes")

    assert LogConfig.from_env() == LogConfig(use_stderr=True)


def test_default_log_path_is_timestamped(tmp_path: Path) -> None:
    path = default_log_path(tmp_path)

    assert path.parent == tmp_path
    assert re.fullmatch(r"limelog_\d{8}_\d{6}\.log", path.name)
