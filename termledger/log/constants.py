"""
Constants for the logging bridge.
"""

import logging


class LogConstants:
    """Constants for the logging bridge."""

    # [12:00:01] [I] message
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    DEFAULT_DATEFMT: str = "%H:%M:%S"

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "false": False,  # Special value to disable the handler
    }

    # Environment variable overriding the configured level
    ENV_LEVEL: str = "TERMLEDGER_LOG_LEVEL"

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
