"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the termledger test suite.
"""

import logging
from collections.abc import Generator

import pytest

from termledger import LogHistory, StreamRegistry

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (threads, real timing)"
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "slow: Tests that take >1 second to run")


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(
            mark.name in ["integration", "slow"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Streams
# =============================================================================


class RecordingStream:
    """Text stream that records every chunk written to it."""

    def __init__(self, tty: bool = False) -> None:
        self.chunks: list[str] = []
        self._tty = tty

    def write(self, chunk: str) -> int:
        self.chunks.append(chunk)
        return len(chunk)

    def flush(self) -> None:
        pass

    def isatty(self) -> bool:
        return self._tty

    def getvalue(self) -> str:
        return "".join(self.chunks)


class FailingStream(RecordingStream):
    """Stream whose write always fails."""

    def write(self, chunk: str) -> int:
        raise OSError("stream closed")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def stream() -> RecordingStream:
    """Provide a recording, non-TTY stream."""
    return RecordingStream()


@pytest.fixture
def tty_stream() -> RecordingStream:
    """Provide a recording stream that reports itself as a TTY."""
    return RecordingStream(tty=True)


@pytest.fixture
def registry() -> StreamRegistry:
    """Provide a fresh stream registry."""
    return StreamRegistry()


@pytest.fixture
def ledger(
    stream: RecordingStream, registry: StreamRegistry
) -> Generator[LogHistory, None, None]:
    """
    Provide a ledger bound to the recording stream.

    Yields:
        LogHistory: Ledger writing to `stream`
    """
    history = LogHistory(stream, registry)
    try:
        yield history
    finally:
        history.close()


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset Python logging global state after each test.

    Prevents handlers installed by one test from writing into another
    test's (already released) ledger.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("test"):
            del logging.root.manager.loggerDict[name]

    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture
def stream_factory() -> type[RecordingStream]:
    """Provide the recording stream class, for tests that need several."""
    return RecordingStream


@pytest.fixture
def failing_stream() -> FailingStream:
    """Provide a stream whose writes raise OSError."""
    return FailingStream()


@pytest.fixture(autouse=True)
def clean_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep level overrides from the calling shell out of the tests."""
    monkeypatch.delenv("TERMLEDGER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
