"""
Exceptions for the logging bridge.
"""

from typing import Any

from ..exceptions import LedgerError


class LogError(LedgerError):
    """Base exception for logging-related errors."""

    pass


class InvalidLogLevelError(LogError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: Any) -> None:
        super().__init__(f"Invalid log level: {level}")
        self.level = level
