"""
Bridge from Python logging into the ledger.

Formatting, coloring and level filtering live here; the ledger itself only
sees already-formatted strings.
"""

from .colors import ColorManager
from .config import LogConfig, resolve_level
from .constants import LogConstants
from .debug import is_debug_namespace
from .exceptions import InvalidLogLevelError, LogError
from .handler import LedgerFormatter, LedgerHandler, install_handler

__all__ = [
    "ColorManager",
    "InvalidLogLevelError",
    "LedgerFormatter",
    "LedgerHandler",
    "LogConfig",
    "LogConstants",
    "LogError",
    "install_handler",
    "is_debug_namespace",
    "resolve_level",
]
