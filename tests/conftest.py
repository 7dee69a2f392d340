"""Shared fixtures: every test starts and ends with the default sink untouched."""

from __future__ import annotations

import pytest

from limelog import MemoryLogSink, get_sink, install_sink


@pytest.fixture(autouse=True)
def _restore_default_sink():
    reset = install_sink(get_sink())
    yield
    reset()


@pytest.fixture
def memory_sink() -> MemoryLogSink:
    """Install and return an in-memory sink for the module-level functions."""

    sink = MemoryLogSink()
    install_sink(sink)
    return sink
