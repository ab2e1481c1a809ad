from importlib.metadata import PackageNotFoundError, version

from .config import LedgerConfig
from .constants import LedgerConstants
from .exceptions import (
    ConcurrentRewriteError,
    ConfigError,
    LedgerError,
    UnknownSessionError,
)
from .history import (
    LogHistory,
    LogLine,
    SessionId,
    StreamHandle,
    StreamRegistry,
)
from .log import LedgerHandler, install_handler
from .pipe import LogPipe
from .time import Ticker, Timer, delta_str
from .ui import BarSymbols, InteractiveSession, ProgressBar, Spinner

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("termledger")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Ledger
    "LogHistory",
    "LogLine",
    "SessionId",
    "StreamHandle",
    "StreamRegistry",
    # Drivers
    "InteractiveSession",
    "Ticker",
    # Render helpers
    "ProgressBar",
    "BarSymbols",
    "Spinner",
    "Timer",
    "delta_str",
    # Logging bridge
    "LedgerHandler",
    "install_handler",
    "LogPipe",
    # Config
    "LedgerConfig",
    "LedgerConstants",
    # Exceptions
    "LedgerError",
    "UnknownSessionError",
    "ConcurrentRewriteError",
    "ConfigError",
]
