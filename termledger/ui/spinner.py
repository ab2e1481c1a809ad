"""
Spinner frames for render callbacks.

Frame sets come from rich's spinner table, so every name rich accepts
("dots", "line", "arc", ...) works here too:

    spinner = Spinner("line")
    with InteractiveSession(ledger, lambda: f"{spinner} waiting for lock"):
        acquire()
"""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.spinner import SPINNERS

from ..exceptions import ConfigError


class Spinner:
    """Animation frame picked from the time elapsed since construction."""

    def __init__(
        self, name: str = "dots", clock: Callable[[], float] = time.monotonic
    ) -> None:
        """
        Select a spinner.

        Args:
            name: rich spinner name
            clock: Source of monotonic seconds

        Raises:
            ConfigError: If rich has no spinner called `name`
        """
        try:
            spec = SPINNERS[name]
        except KeyError:
            raise ConfigError(f'Invalid spinner name: "{name}"', name=name) from None

        self._name = name
        self._frames = list(spec["frames"])
        self._interval = spec["interval"] / 1000
        self._clock = clock
        self._start = clock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def frames(self) -> list[str]:
        return list(self._frames)

    @property
    def interval(self) -> float:
        """Seconds each frame stays on screen."""
        return self._interval

    def frame(self) -> str:
        """Frame for the current moment."""
        elapsed = max(self._clock() - self._start, 0.0)
        return self._frames[int(elapsed / self._interval) % len(self._frames)]

    def __str__(self) -> str:
        return self.frame()
