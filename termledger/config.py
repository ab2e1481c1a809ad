"""
Configuration for ledgers and interactive session drivers.

Values come from explicit parameters, a configuration dictionary or a YAML
file, with TERMLEDGER_* environment variables applied last:

    TERMLEDGER_REFRESH_INTERVAL=0.1   -> refresh_interval = 0.1
    TERMLEDGER_HIDE_CURSOR=false      -> hide_cursor = False
    TERMLEDGER_NON_INTERACTIVE=1      -> interactive = False
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .constants import LedgerConstants
from .exceptions import ConfigError


def _convert_env_value(value: str) -> bool | int | float | str | None:
    """
    Convert environment variable string to appropriate type.

    Args:
        value: Environment variable value as string

    Returns:
        Converted value with appropriate type
    """
    if value.lower() in ("null", "none", ""):
        return None

    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


def navigate_to_section(config_dict: dict, section: str) -> dict:
    """Navigate to a dotted section in a config dict ({} if missing)."""
    current: Any = config_dict
    for part in section.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return {}
    if current is None:
        return {}
    if not isinstance(current, dict):
        raise ConfigError("Config section is not a mapping", section=section)
    return current


@dataclass(frozen=True)
class LedgerConfig:
    """
    Immutable configuration for interactive output.

    Attributes:
        refresh_interval: Seconds between redraws of an interactive session
        interactive: Force interactive mode on/off (None = detect TTY)
        hide_cursor: Hide the cursor while a rewrite is in progress
    """

    refresh_interval: float = LedgerConstants.DEFAULT_REFRESH_INTERVAL
    interactive: bool | None = None
    hide_cursor: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.refresh_interval, (int, float)) or isinstance(
            self.refresh_interval, bool
        ):
            raise ConfigError(
                "refresh_interval must be a number",
                refresh_interval=self.refresh_interval,
            )
        if self.refresh_interval <= 0:
            raise ConfigError(
                "refresh_interval must be positive",
                refresh_interval=self.refresh_interval,
            )

    @classmethod
    def from_params(
        cls,
        refresh_interval: float | None = None,
        interactive: bool | None = None,
        hide_cursor: bool = True,
        env: bool = True,
    ) -> LedgerConfig:
        """
        Create a config from individual parameters.

        Args:
            refresh_interval: Seconds between redraws (None = default)
            interactive: Force interactive mode (None = detect TTY)
            hide_cursor: Hide the cursor during rewrites
            env: Whether to apply TERMLEDGER_* environment overrides

        Returns:
            LedgerConfig instance
        """
        config = cls(
            refresh_interval=(
                LedgerConstants.DEFAULT_REFRESH_INTERVAL
                if refresh_interval is None
                else refresh_interval
            ),
            interactive=interactive,
            hide_cursor=hide_cursor,
        )
        return config.with_env_overrides() if env else config

    @classmethod
    def from_dict(
        cls, config_dict: dict, section: str = "ledger", env: bool = True
    ) -> LedgerConfig:
        """
        Create a config from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary
            section: Dotted path of the section to read (default: "ledger")
            env: Whether to apply TERMLEDGER_* environment overrides

        Returns:
            LedgerConfig instance

        Example:
            config = LedgerConfig.from_dict(
                {"ui": {"ledger": {"refresh_interval": 0.1}}}, section="ui.ledger"
            )
        """
        current = navigate_to_section(config_dict, section)
        return cls.from_params(
            refresh_interval=current.get("refresh_interval"),
            interactive=current.get("interactive"),
            hide_cursor=current.get("hide_cursor", True),
            env=env,
        )

    @classmethod
    def from_yaml(
        cls, path: str | Path, section: str = "ledger", env: bool = True
    ) -> LedgerConfig:
        """
        Create a config from a YAML file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping", path=str(path))
        return cls.from_dict(data, section=section, env=env)

    def with_env_overrides(self) -> LedgerConfig:
        """Return a copy with TERMLEDGER_* environment variables applied."""
        overrides: dict[str, Any] = {}
        prefix = LedgerConstants.ENV_PREFIX

        interval = os.environ.get(f"{prefix}REFRESH_INTERVAL")
        if interval:
            value = _convert_env_value(interval)
            if isinstance(value, str):
                raise ConfigError(
                    "refresh_interval must be a number", refresh_interval=value
                )
            overrides["refresh_interval"] = value

        hide = os.environ.get(f"{prefix}HIDE_CURSOR")
        if hide:
            overrides["hide_cursor"] = hide.lower() in LedgerConstants.TRUTHY

        non_interactive = os.environ.get(LedgerConstants.ENV_NON_INTERACTIVE, "")
        if non_interactive.lower() in LedgerConstants.TRUTHY:
            overrides["interactive"] = False

        return replace(self, **overrides) if overrides else self
