"""
Duration formatting for live status lines.

Example Usage:
    >>> delta_str(0.25)
    '250ms'
    >>> delta_str(3661.5)
    '1h1m1s'
    >>> delta_str(7.25, decimals=1)
    '7.2s'
"""

import math

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
MILLISECONDS_PER_SECOND = 1000


class InvalidDurationError(ValueError):
    """Raised when a duration cannot be formatted."""

    pass


def _validate_duration_input(secs: float) -> None:
    if isinstance(secs, bool) or not isinstance(secs, (int, float)):
        raise InvalidDurationError(
            f"Duration must be a number, got {type(secs).__name__}"
        )
    if math.isnan(secs):
        raise InvalidDurationError("Duration cannot be NaN")
    if math.isinf(secs):
        raise InvalidDurationError("Duration cannot be infinite")
    if secs < 0:
        raise InvalidDurationError(f"Duration cannot be negative, got {secs}")


def _extract_time_components(secs: float) -> tuple[int, int, int, float]:
    """Split seconds into (days, hours, minutes, seconds)."""
    days, remaining = divmod(secs, SECONDS_PER_DAY)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, remaining = divmod(remaining, SECONDS_PER_MINUTE)
    return int(days), int(hours), int(minutes), remaining


def _format_seconds(seconds: float, decimals: int) -> str:
    # Truncated, not rounded
    scale = 10**decimals
    value = math.floor(seconds * scale) / scale
    return f"{value:.{decimals}f}s"


def delta_str(secs: float, decimals: int = 0) -> str:
    """
    Format a duration in seconds as a compact human-readable string.

    Durations under a second are shown in whole milliseconds. Longer ones
    list days, hours and minutes down from the largest non-zero unit, then
    seconds with `decimals` digits once no larger unit is present.

    Args:
        secs: Duration in seconds
        decimals: Fraction digits for durations under a minute

    Returns:
        Formatted duration, e.g. "350ms", "12s", "2m5s", "1d0h0m3s"

    Raises:
        InvalidDurationError: If secs is negative, NaN, infinite or not a number
    """
    _validate_duration_input(secs)
    if secs < 1:
        return f"{math.floor(secs * MILLISECONDS_PER_SECOND)}ms"

    days, hours, minutes, seconds = _extract_time_components(secs)
    result = ""
    if days:
        result += f"{days}d"
    if result or hours:
        result += f"{hours}h"
    if result or minutes:
        result += f"{minutes}m"

    if result:
        return result + f"{int(seconds)}s"
    return _format_seconds(seconds, decimals)
