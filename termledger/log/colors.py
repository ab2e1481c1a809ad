"""
Level colors for formatted log lines.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    BLUE = "\x1b[34"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """
        Get the color sequence for a log level.

        Levels between the standard ones use the color of the nearest
        standard level below them.

        Returns:
            Color escape sequence (without the terminating "m")
        """
        if level in ColorManager.COLORS:
            return ColorManager.COLORS[level]
        lower = [lvl for lvl in ColorManager.COLORS if lvl <= level]
        if not lower:
            return ColorManager.DEFAULT
        return ColorManager.COLORS[max(lower)]

    @staticmethod
    def colorize(text: str, level: int, bold: bool = False) -> str:
        """Wrap text in the level's color and a reset."""
        col = ColorManager.get_color_for_level(level)
        return f"{col}{';1' if bold else ''}m{text}{ColorManager.RESET}"
