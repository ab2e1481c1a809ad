"""
Registry of physical output streams.

Each distinct stream is instrumented at most once: its write method is
replaced by a wrapper that records every chunk in the stream's history before
delegating to the original method. Every LogHistory bound to the same stream
shares the same StreamHandle, and therefore the same history.

The registry is an explicit object owned by the host application. Create one
at startup and pass it to every LogHistory:

    registry = StreamRegistry()
    out = LogHistory(sys.stderr, registry)
    progress = LogHistory(sys.stderr, registry)  # same handle as `out`
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .lines import LogLine, update_history
from .session import SessionId

WriteFn = Callable[[str], Any]

_MISSING = object()

lg = logging.getLogger(__name__)


def _discard(content: str) -> int:
    """Write function for ledgers bound to no stream."""
    return len(content)


def _as_text(chunk: Any) -> str:
    if isinstance(chunk, (bytes, bytearray)):
        return bytes(chunk).decode("utf-8", errors="replace")
    return str(chunk)


@dataclass(eq=False)
class StreamHandle:
    """
    Shared state for one physical stream.

    Attributes:
        stream: The stream itself (None for a discarding ledger)
        original_write: The stream's un-intercepted write function
        history: Lines currently represented on the terminal
        active_sessions: Sessions that may still rewrite their lines
        rewriting: Session whose interactive write is in progress, if any
        lock: Guards history, active_sessions and rewriting as a unit
    """

    stream: Any
    original_write: WriteFn
    history: list[LogLine] = field(default_factory=list)
    active_sessions: list[SessionId] = field(default_factory=list)
    rewriting: SessionId | None = None
    lock: threading.RLock = field(default_factory=threading.RLock)
    refs: int = 0
    shadowed: Any = _MISSING


class StreamRegistry:
    """
    Map from physical stream to its shared StreamHandle.

    Streams are keyed by identity. bind() is idempotent per stream; release()
    undoes one bind() and restores the stream's write method after the last.
    """

    def __init__(self) -> None:
        self._handles: dict[int, StreamHandle] = {}
        self._lock = threading.Lock()

    def bind(self, stream: Any) -> StreamHandle:
        """
        Return the handle for a stream, instrumenting it on first use.

        Args:
            stream: Writable text stream, or None to discard all output

        Returns:
            StreamHandle shared by every ledger bound to this stream
        """
        with self._lock:
            handle = self._handles.get(id(stream))
            created = handle is None
            if handle is None:
                handle = self._instrument(stream)
                self._handles[id(stream)] = handle
            handle.refs += 1
        if created:
            lg.debug("bound stream %r", stream)
        return handle

    def release(self, stream: Any) -> None:
        """
        Drop one binding of a stream.

        When the last binding goes away the stream's original write method is
        restored and its history is forgotten. Releasing an unbound stream is
        a no-op.
        """
        with self._lock:
            handle = self._handles.get(id(stream))
            if handle is None:
                return
            handle.refs -= 1
            if handle.refs > 0:
                return
            del self._handles[id(stream)]
            self._restore(handle)
        with handle.lock:
            handle.history.clear()
            handle.active_sessions.clear()
        lg.debug("released stream %r", stream)

    def get(self, stream: Any) -> StreamHandle | None:
        """Return the handle for a stream without binding it."""
        with self._lock:
            return self._handles.get(id(stream))

    def __contains__(self, stream: Any) -> bool:
        return self.get(stream) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def _instrument(self, stream: Any) -> StreamHandle:
        """Create a handle and route the stream's write through its history."""
        if stream is None:
            return StreamHandle(stream=None, original_write=_discard)

        handle = StreamHandle(stream=stream, original_write=stream.write)
        handle.shadowed = getattr(stream, "__dict__", {}).get("write", _MISSING)

        def write(chunk: Any, *args: Any, **kwargs: Any) -> Any:
            with handle.lock:
                update_history(handle, None, _as_text(chunk))
                return handle.original_write(chunk, *args, **kwargs)

        stream.write = write
        return handle

    @staticmethod
    def _restore(handle: StreamHandle) -> None:
        """Give the stream back its own write method."""
        stream = handle.stream
        if stream is None:
            return
        if handle.shadowed is _MISSING:
            del stream.write
        else:
            stream.write = handle.shadowed
