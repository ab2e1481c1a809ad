"""
Text progress bar for render callbacks.

A ProgressBar asks a callback for the current progress (0.0 to 1.0) every
time it is rendered and fills a format string with it:

    bar = ProgressBar(lambda: done / total, fmt=":bar :percentage :remaining")
    with InteractiveSession(ledger, bar.render):
        ...

Format tokens:
    :bar         [=====>------]
    :percentage  42%
    :elapsed     time since the bar was created
    :remaining   estimated time left (empty until progress is made)
"""

from __future__ import annotations

import math
import re
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..time import delta_str

_TOKEN = re.compile(r":(bar|percentage|elapsed|remaining)")


@dataclass(frozen=True)
class BarSymbols:
    """Characters the bar is drawn with."""

    head: str = "["
    tail: str = "]"
    complete: str = "="
    complete_head: str = ">"
    incomplete: str = "-"


def _round(value: float) -> int:
    """Round half up."""
    return math.floor(value + 0.5)


def _clamp(progress: float) -> float:
    if math.isnan(progress):
        return 0.0
    return min(max(progress, 0.0), 1.0)


class ProgressBar:
    """Renders progress reported by a callback as a single line of text."""

    def __init__(
        self,
        get_progress: Callable[[], float],
        fmt: str = ":bar :percentage",
        width: int = 12,
        symbols: BarSymbols | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the bar.

        Args:
            get_progress: Returns progress between 0.0 and 1.0 (clamped)
            fmt: Format string with :bar, :percentage, :elapsed, :remaining
            width: Number of cells between the bar's head and tail
            symbols: Bar characters (default: BarSymbols())
            clock: Source of monotonic seconds
        """
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self._get_progress = get_progress
        self._fmt = fmt
        self._width = width
        self._symbols = symbols or BarSymbols()
        self._clock = clock
        self._start = clock()

    def progress(self) -> float:
        """Current progress, clamped to [0, 1]."""
        return _clamp(self._get_progress())

    def render(self) -> str:
        """Fill the format string with the current progress."""
        progress = self.progress()
        elapsed = max(self._clock() - self._start, 0.0)
        tokens = {
            "bar": lambda: self._bar(progress),
            "percentage": lambda: f"{_round(progress * 100)}%",
            "elapsed": lambda: delta_str(elapsed),
            "remaining": lambda: _remaining(progress, elapsed),
        }
        return _TOKEN.sub(lambda m: tokens[m.group(1)](), self._fmt)

    def _bar(self, progress: float) -> str:
        s = self._symbols
        complete = _round(progress * self._width)
        incomplete = self._width - complete
        filled = s.complete * complete
        if complete and progress < 1:
            filled = filled[:-1] + s.complete_head
        return f"{s.head}{filled}{s.incomplete * incomplete}{s.tail}"

    def __str__(self) -> str:
        return self.render()


def _remaining(progress: float, elapsed: float) -> str:
    if progress <= 0:
        return ""
    return delta_str(max(elapsed / progress - elapsed, 0.0), decimals=1)
