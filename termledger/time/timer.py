"""
Elapsed-time display for render callbacks.

Example:
    timer = Timer()
    with InteractiveSession(ledger, lambda: f"building... {timer}"):
        build()
"""

import time
from collections.abc import Callable

from .delta import delta_str


class Timer:
    """Clock started at construction, formatted with delta_str()."""

    def __init__(
        self, decimals: int = 0, clock: Callable[[], float] = time.monotonic
    ) -> None:
        """
        Start the timer.

        Args:
            decimals: Fraction digits shown for durations under a minute
            clock: Source of monotonic seconds
        """
        self._decimals = decimals
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        """Restart the timer from zero."""
        self._start = self._clock()

    def elapsed(self) -> float:
        """Seconds since construction or the last reset()."""
        return max(self._clock() - self._start, 0.0)

    def __str__(self) -> str:
        return delta_str(self.elapsed(), decimals=self._decimals)
