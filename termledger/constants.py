"""
Constants shared across termledger.
"""


class LedgerConstants:
    """Constants for the ledger and its session drivers."""

    # Line terminator used to split incoming chunks into history lines
    EOL: str = "\n"

    # ~60 refreshes per second
    DEFAULT_REFRESH_INTERVAL: float = 1 / 60

    # Environment overrides
    ENV_PREFIX: str = "TERMLEDGER_"
    ENV_NON_INTERACTIVE: str = "TERMLEDGER_NON_INTERACTIVE"

    # Values accepted as "true" in environment variables
    TRUTHY: tuple[str, ...] = ("1", "true", "yes")
