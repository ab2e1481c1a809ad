"""
Configuration for the logging bridge.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ..config import navigate_to_section
from .constants import LogConstants
from .debug import is_debug_namespace
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        level: Level name ("info", "debug", ...), numeric value, or False
               to disable output

    Returns:
        Numeric log level, or False to disable output

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level
    if level.isnumeric():
        return int(level)
    name = level.lower()
    if name in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[name]
    raise InvalidLogLevelError(level)


def _env_level() -> int | bool | None:
    """Level from TERMLEDGER_LOG_LEVEL, or None if unset or not a valid level."""
    value = os.environ.get(LogConstants.ENV_LEVEL)
    if not value:
        return None
    try:
        return resolve_level(value)
    except InvalidLogLevelError:
        return None


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for LedgerHandler output.

    Attributes:
        level: Minimum level to emit, or False to emit nothing
        colors: Whether to color the level marker and message
        datefmt: strftime format for the timestamp
    """

    level: int | bool = logging.INFO
    colors: bool = True
    datefmt: str = LogConstants.DEFAULT_DATEFMT

    @classmethod
    def from_params(
        cls,
        level: str | int | bool = "info",
        colors: bool = True,
        datefmt: str | None = None,
        namespace: str | None = None,
        env: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        The level is picked in order: a valid TERMLEDGER_LOG_LEVEL, then
        "debug" when `namespace` is listed in $DEBUG, then `level`. An
        invalid TERMLEDGER_LOG_LEVEL is ignored.

        Args:
            level: Log level (string name, numeric value, or False)
            colors: Whether to enable colored output
            datefmt: Timestamp format (default: %H:%M:%S)
            namespace: Logger name checked against $DEBUG
            env: Whether to read TERMLEDGER_LOG_LEVEL and DEBUG

        Returns:
            LogConfig instance

        Raises:
            InvalidLogLevelError: If `level` is used and is not a valid level
        """
        resolved = _env_level() if env else None
        if resolved is None and env and namespace and is_debug_namespace(namespace):
            resolved = logging.DEBUG
        if resolved is None:
            resolved = resolve_level(level)
        return cls(
            level=resolved,
            colors=colors,
            datefmt=datefmt or LogConstants.DEFAULT_DATEFMT,
        )

    @classmethod
    def from_config(
        cls,
        config_dict: dict,
        section: str = "logging",
        namespace: str | None = None,
        env: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary
            section: Dotted configuration section (default: "logging")
            namespace: Logger name checked against $DEBUG
            env: Whether to read TERMLEDGER_LOG_LEVEL and DEBUG

        Returns:
            LogConfig instance

        Example:
            config = LogConfig.from_config({"logging": {"level": "debug"}})
        """
        current = navigate_to_section(config_dict, section)

        colors = current.get("colors", True)
        if isinstance(colors, dict):
            colors = colors.get("enabled", True)

        return cls.from_params(
            level=current.get("level", "info"),
            colors=colors,
            datefmt=current.get("datefmt"),
            namespace=namespace,
            env=env,
        )
