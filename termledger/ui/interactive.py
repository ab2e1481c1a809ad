"""
Interactive session driver.

Keeps one interactive session alive on a LogHistory, redrawing it at a fixed
interval from a background ticker while other output keeps flowing through
the same ledger. Only redraws on a TTY; otherwise the final state is written
once when the session stops.

Example:
    registry = StreamRegistry()
    ledger = LogHistory(sys.stderr, registry)
    done = 0

    with InteractiveSession(ledger, lambda: f"copied {done}/{total} files") as s:
        for path in paths:
            copy(path)
            done += 1
            s.log(f"copied {path}")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any

from ..config import LedgerConfig
from ..constants import LedgerConstants
from ..history import LogHistory, SessionId
from ..time import Ticker

lg = logging.getLogger(__name__)


def _is_interactive(stream: Any) -> bool:
    """Check if the stream is an interactive terminal."""
    if os.environ.get(LedgerConstants.ENV_NON_INTERACTIVE, "").lower() in (
        LedgerConstants.TRUTHY
    ):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    return bool(isatty())


def _terminated(text: str) -> str:
    eol = LedgerConstants.EOL
    return text if text.endswith(eol) else text + eol


class InteractiveSession:
    """
    Periodically redrawn output owned by one interactive session.

    `render` returns the session's current text (one or more lines). It is
    called from the ticker thread on every refresh, and once more when the
    session stops so the final state is left on screen.
    """

    def __init__(
        self,
        ledger: LogHistory,
        render: Callable[[], str],
        config: LedgerConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the session driver.

        Args:
            ledger: Ledger of the stream to draw on
            render: Returns the text to display
            config: Refresh interval and interactivity (default: LedgerConfig())
            logger: Logger for errors raised while redrawing
        """
        self._ledger = ledger
        self._render = render
        self._config = config or LedgerConfig.from_params()
        self._lg = logger or lg

        interactive = self._config.interactive
        if interactive is None:
            interactive = _is_interactive(ledger.stream)
        self._interactive = interactive

        self._session_id: SessionId | None = None
        self._ticker: Ticker | None = None
        self._started = False

    @property
    def is_interactive(self) -> bool:
        """Check if the session redraws in place."""
        return self._interactive

    @property
    def session_id(self) -> SessionId | None:
        """Identifier of the underlying ledger session while running."""
        return self._session_id

    @property
    def is_active(self) -> bool:
        """Check if the session is started and still active on the ledger."""
        if not self._started:
            return False
        if self._session_id is None:
            return True
        return self._ledger.has_interactive_session(self._session_id)

    def start(self) -> InteractiveSession:
        """
        Begin the session and start redrawing.

        Raises:
            RuntimeError: If the session was already started
        """
        if self._started:
            raise RuntimeError("Interactive session already started")
        self._started = True

        if not self._interactive:
            return self

        self._session_id = self._ledger.begin_interactive_session()
        self._ticker = Ticker(
            self._lg,
            self._tick,
            secs=self._config.refresh_interval,
            name=f"termledger-{self._session_id.serial}",
        )
        self._ticker.start()
        return self

    def stop(self) -> None:
        """
        Draw the final state and end the session.

        Signals the ticker and ends the ledger session in the same call, so
        the refresh loop never outlives the session. Safe to call twice.
        """
        if not self._started:
            return
        self._started = False

        if self._ticker is not None:
            self._ticker.stop()
            self._ticker.join()
            self._ticker = None

        session_id, self._session_id = self._session_id, None
        if session_id is None:
            self._ledger.write(_terminated(self._render()))
            return

        try:
            if self._ledger.has_interactive_session(session_id):
                self._ledger.do_interactive_write(session_id, self._draw)
        finally:
            if self._ledger.has_interactive_session(session_id):
                self._ledger.end_interactive_session(session_id)

    def refresh(self) -> None:
        """Redraw now instead of waiting for the next tick."""
        session_id = self._session_id
        if session_id is not None and self._ledger.has_interactive_session(session_id):
            self._ledger.do_interactive_write(session_id, self._draw)

    def log(self, message: str) -> None:
        """Write a plain line below the session's output."""
        self._ledger.write(_terminated(message))

    def _draw(self) -> None:
        self._ledger.write(_terminated(self._render()))

    def _tick(self) -> None:
        session_id = self._session_id
        if session_id is None or not self._ledger.has_interactive_session(session_id):
            if self._ticker is not None:
                self._ticker.stop()
            return
        self._ledger.do_interactive_write(session_id, self._draw)

    def __enter__(self) -> InteractiveSession:
        return self.start()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.stop()
