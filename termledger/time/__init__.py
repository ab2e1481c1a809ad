"""
Time utilities.
"""

from .delta import InvalidDurationError, delta_str
from .ticker import Ticker
from .timer import Timer

__all__ = ["InvalidDurationError", "Ticker", "Timer", "delta_str"]
