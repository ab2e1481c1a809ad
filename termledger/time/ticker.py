"""
Cancellable periodic task.

A Ticker calls a function from a daemon thread at a fixed interval until
stopped. The stop flag is checked before the first tick and every time the
interval wait wakes up, so stop() takes effect within one interval.

Example Usage:
    import logging

    lg = logging.getLogger(__name__)

    ticker = Ticker(lg, lambda: print("tick"), secs=0.5)
    ticker.start()
    ...
    ticker.stop()
    ticker.join()
"""

import threading
from collections.abc import Callable, Iterator
from typing import Any


class Ticker:
    """
    Periodic callback in a background thread.

    The first tick fires as soon as the thread starts. Errors raised by the
    callback are logged and the ticker keeps running.
    """

    def __init__(
        self,
        lg: Any,
        fn: Callable[[], None],
        secs: float = 1.0,
        name: str = "ticker",
    ) -> None:
        """
        Initialize the ticker.

        Args:
            lg: Logger instance for error logging
            fn: Callable to execute on each tick
            secs: Interval between ticks in seconds
            name: Name of the background thread
        """
        if secs <= 0:
            raise ValueError(f"secs must be positive, got {secs}")

        self._lg = lg
        self._fn = fn
        self._secs = secs
        self._name = name
        self._running = False
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def secs(self) -> float:
        """Interval between ticks in seconds."""
        return self._secs

    def start(self) -> threading.Thread:
        """
        Run the ticker in a daemon thread.

        Returns:
            The started thread

        Raises:
            RuntimeError: If the ticker is already running
        """
        if self._running:
            raise RuntimeError("Ticker is already running")
        self._running = True
        self._thread = threading.Thread(target=self._loop, name=self._name, daemon=True)
        self._thread.start()
        return self._thread

    def _loop(self) -> None:
        try:
            for _ in self._ticks():
                try:
                    self._fn()
                except Exception:
                    self._lg.exception("Error in ticker callback")
        finally:
            self._running = False

    def _ticks(self) -> Iterator[None]:
        if self._stop_event.is_set():
            return
        yield
        while not self._stop_event.wait(timeout=self._secs):
            yield

    def stop(self) -> None:
        """Signal the ticker to stop after the current tick."""
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the background thread to finish (no-op if none)."""
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def is_running(self) -> bool:
        """Check if the ticker loop is currently running."""
        return self._running
