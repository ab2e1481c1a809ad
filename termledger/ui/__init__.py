"""
Drivers and render helpers for interactive terminal output.
"""

from .interactive import InteractiveSession
from .progress import BarSymbols, ProgressBar
from .spinner import Spinner

__all__ = ["BarSymbols", "InteractiveSession", "ProgressBar", "Spinner"]
