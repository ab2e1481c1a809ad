"""
Terminal control primitives emitted by the ledger.

The ledger owns all cursor movement on a bound stream. The escape sequences
are produced by rich's Control segments so they match what rich itself emits
when it redraws live displays.
"""

import re

from rich.control import Control, ControlType

from .constants import LedgerConstants

# Pattern to match CSI escape sequences (colors, cursor movement, erase)
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

HIDE_CURSOR: str = str(Control.show_cursor(False))
SHOW_CURSOR: str = str(Control.show_cursor(True))

# Return to column 0, then erase the whole line
ERASE_LINE: str = str(
    Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2))
)

CARRIAGE_RETURN: str = str(Control(ControlType.CARRIAGE_RETURN))


def cursor_up(count: int) -> str:
    """Move the cursor up `count` lines. Empty string for count <= 0."""
    if count <= 0:
        return ""
    return str(Control((ControlType.CURSOR_UP, count)))


def cursor_down(count: int) -> str:
    """Move the cursor down `count` lines. Empty string for count <= 0."""
    if count <= 0:
        return ""
    return str(Control((ControlType.CURSOR_DOWN, count)))


def move_to_column(column: int) -> str:
    """Move the cursor to a 0-based column on the current line."""
    return str(Control.move_to_column(max(column, 0)))


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    if "\x1b" not in text:
        return text
    return _ANSI_PATTERN.sub("", text)


def is_complete_line(text: str) -> bool:
    """
    Check whether text ends with a line terminator.

    Trailing escape sequences (e.g. a color reset written after the newline)
    are ignored, so "done\\n\\x1b[0m" counts as a complete line.
    """
    return strip_ansi(text).endswith(LedgerConstants.EOL)
