"""
Log history: writing to a stream whose lines may be periodically rewritten.

A LogHistory wraps an output stream so that ordinary log lines and
interactive lines (progress bars, spinners, live status) can share it. Each
interactive session owns the lines it writes; redrawing a session moves the
cursor back to the session's first line, lets the session write its new
content, then replays every line other writers produced after it.

Example:
    registry = StreamRegistry()
    ledger = LogHistory(sys.stderr, registry)

    session = ledger.begin_interactive_session()
    ledger.do_interactive_write(session, lambda: ledger.write("[==>  ] 40%\\n"))
    ledger.write("downloaded a.tar.gz\\n")
    ledger.do_interactive_write(session, lambda: ledger.write("[====>] 80%\\n"))
    ledger.end_interactive_session(session)

All writers must go through LogHistory.write() (or the intercepted
stream.write()); the ledger owns every cursor movement on the stream.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .. import control
from ..config import LedgerConfig
from ..constants import LedgerConstants
from ..exceptions import ConcurrentRewriteError, UnknownSessionError
from .lines import LogLine, split_lines, update_history
from .registry import StreamHandle, StreamRegistry
from .session import SessionId, mint_session_id

lg = logging.getLogger(__name__)


class LogHistory:
    """
    Ledger of the lines written to one physical stream.

    Instances bound to the same stream through the same registry share their
    history, active sessions and rewrite lock.
    """

    def __init__(
        self, stream: Any, registry: StreamRegistry, hide_cursor: bool = True
    ) -> None:
        """
        Bind a new ledger to a stream.

        Args:
            stream: Writable text stream, or None to discard output
            registry: Registry shared by every ledger in the process
            hide_cursor: Hide the cursor while a rewrite is in progress
        """
        self._registry = registry
        self._hide_cursor = hide_cursor
        self._stream: Any = None
        self._handle: StreamHandle | None = None
        self.set_stream(stream)

    @classmethod
    def from_config(
        cls, stream: Any, registry: StreamRegistry, config: LedgerConfig
    ) -> LogHistory:
        """Create a ledger honouring a LedgerConfig's cursor settings."""
        return cls(stream, registry, hide_cursor=config.hide_cursor)

    @property
    def stream(self) -> Any:
        """The stream this ledger writes to."""
        return self._stream

    @property
    def handle(self) -> StreamHandle:
        """Shared state of the bound stream."""
        if self._handle is None:
            raise RuntimeError("LogHistory is closed")
        return self._handle

    def set_stream(self, stream: Any) -> None:
        """
        Rebind the ledger to another stream.

        The previous stream is released; once no ledger is bound to it any
        more, its write method is restored.
        """
        handle = self._registry.bind(stream)
        previous, had_previous = self._stream, self._handle is not None
        self._stream, self._handle = stream, handle
        if had_previous:
            self._registry.release(previous)

    def close(self) -> None:
        """Release the bound stream. The ledger cannot be used afterwards."""
        if self._handle is None:
            return
        self._handle = None
        self._registry.release(self._stream)

    # ----- Interactive sessions ---------------------------------------------

    def begin_interactive_session(self) -> SessionId:
        """Start a new interactive session and return its identifier."""
        handle = self.handle
        session_id = mint_session_id()
        with handle.lock:
            handle.active_sessions.append(session_id)
        lg.debug("began interactive session %r", session_id)
        return session_id

    def end_interactive_session(self, session_id: SessionId) -> None:
        """
        End an interactive session.

        Lines the session produced become plain lines. When the last active
        session on the stream ends, the history is cleared: lines already on
        screen no longer need tracking. When ended from inside a render
        callback, the history is cleared once the rewrite finishes.

        Raises:
            UnknownSessionError: If the session is not active
        """
        handle = self.handle
        with handle.lock:
            self._require_active(handle, session_id)
            _untag(handle.history, session_id)
            handle.active_sessions.remove(session_id)
            if not handle.active_sessions and handle.rewriting is None:
                handle.history.clear()
        lg.debug("ended interactive session %r", session_id)

    def has_interactive_session(self, session_id: SessionId) -> bool:
        """Check whether a session is active on this stream."""
        handle = self.handle
        with handle.lock:
            return _contains(handle.active_sessions, session_id)

    def do_interactive_write(
        self, session_id: SessionId, render: Callable[[], Any]
    ) -> None:
        """
        Redraw a session's lines in place.

        Moves the cursor up to the session's first line, calls `render` (which
        must write the session's new content through write()), then replays
        the lines other writers produced after the session's first line.
        Replayed lines that already sit on the row they are replayed to are
        skipped over instead of being redrawn.

        `render` may end its own session. Its lines then become plain lines
        once the rewrite finishes, and the history is dropped if no other
        session is left on the stream.

        Args:
            session_id: Active session to redraw
            render: Callback performing one or more write() calls

        Raises:
            UnknownSessionError: If the session is not active
            ConcurrentRewriteError: If a rewrite is already in progress on
                                    this stream (e.g. called from `render`)
        """
        handle = self.handle
        with handle.lock:
            self._require_active(handle, session_id)
            if handle.rewriting is not None:
                raise ConcurrentRewriteError(session_id, handle.rewriting)

            handle.rewriting = session_id
            if self._hide_cursor:
                handle.original_write(control.HIDE_CURSOR)
            try:
                self._rewrite(handle, session_id, render)
            finally:
                handle.rewriting = None
                if not _contains(handle.active_sessions, session_id):
                    _untag(handle.history, session_id)
                if not handle.active_sessions:
                    handle.history.clear()
                if self._hide_cursor:
                    handle.original_write(control.SHOW_CURSOR)

    def _rewrite(
        self, handle: StreamHandle, session_id: SessionId, render: Callable[[], Any]
    ) -> None:
        anchor = _first_index(handle.history, session_id)
        if anchor == -1:
            render()
            return

        before = handle.history
        replay = [line for line in before[anchor:] if line.session_id is not session_id]
        handle.history = before[:anchor]
        _emit(handle, control.cursor_up(_cursor_row(before) - anchor))
        if not before[-1].complete:
            handle.original_write(control.CARRIAGE_RETURN)

        render()

        history = handle.history
        if replay and history and not history[-1].complete:
            # Replayed lines start on a row of their own
            history[-1].content += LedgerConstants.EOL
            handle.original_write(LedgerConstants.EOL)

        for line in replay:
            if line.complete and _same_row(before, len(history), line):
                handle.original_write(control.cursor_down(1))
            else:
                handle.original_write(control.ERASE_LINE)
                handle.original_write(line.content)
            history.append(line)

        self._erase_stale_rows(handle, len(before) - len(history))

    @staticmethod
    def _erase_stale_rows(handle: StreamHandle, count: int) -> None:
        """Blank rows left over below a rewrite that shrank, then return."""
        if count <= 0:
            return
        history = handle.history
        open_line = bool(history) and not history[-1].complete
        for i in range(count):
            if i or open_line:
                handle.original_write(control.cursor_down(1))
            handle.original_write(control.ERASE_LINE)
        _emit(handle, control.cursor_up(count if open_line else count - 1))
        if open_line:
            handle.original_write(control.move_to_column(_column(history[-1])))

    # ----- Writing ----------------------------------------------------------

    def write(self, content: str) -> None:
        """
        Write content to the stream, recording it in the history.

        Inside a render callback the write belongs to the session being
        redrawn: every line it starts overwrites the terminal row it lands
        on, while text continuing an unterminated line is appended to it.
        Outside a rewrite it is a plain append. Faults raised by the stream
        propagate unchanged.
        """
        handle = self.handle
        with handle.lock:
            session_id = handle.rewriting
            if session_id is None:
                update_history(handle, None, content)
                handle.original_write(content)
                return

            for segment in split_lines(content):
                history = handle.history
                continues = bool(history) and not history[-1].complete
                update_history(handle, session_id, segment)
                if not continues:
                    handle.original_write(control.ERASE_LINE)
                handle.original_write(segment)

    # ----- Helpers ----------------------------------------------------------

    @staticmethod
    def _require_active(handle: StreamHandle, session_id: SessionId) -> None:
        if not _contains(handle.active_sessions, session_id):
            raise UnknownSessionError(session_id)


def _contains(sessions: list[SessionId], session_id: Any) -> bool:
    return any(s is session_id for s in sessions)


def _first_index(history: list[LogLine], session_id: SessionId) -> int:
    for i, line in enumerate(history):
        if line.session_id is session_id:
            return i
    return -1


def _untag(history: list[LogLine], session_id: SessionId) -> None:
    for line in history:
        if line.session_id is session_id:
            line.session_id = None


def _cursor_row(history: list[LogLine]) -> int:
    """Row the cursor sits on, counted from the first history line."""
    if history and not history[-1].complete:
        return len(history) - 1
    return len(history)


def _column(line: LogLine) -> int:
    return len(control.strip_ansi(line.content))


def _same_row(before: list[LogLine], row: int, line: LogLine) -> bool:
    return row < len(before) and before[row].content == line.content


def _emit(handle: StreamHandle, sequence: str) -> None:
    if sequence:
        handle.original_write(sequence)
