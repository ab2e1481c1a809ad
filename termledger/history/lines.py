"""
Line history bookkeeping.

Splits incoming chunks of text into lines and merges them into a stream's
history. A chunk that does not end with a line terminator leaves the last
history entry "open"; the next chunk's first segment is appended to it rather
than starting a new entry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import LedgerConstants
from ..control import is_complete_line
from .session import SessionId

if TYPE_CHECKING:
    from .registry import StreamHandle

# A segment is everything up to and including a terminator, or a trailing
# unterminated remainder. No empty segment is ever produced.
_SEGMENT_PATTERN = re.compile(
    rf"[^{LedgerConstants.EOL}]*{LedgerConstants.EOL}|[^{LedgerConstants.EOL}]+"
)


@dataclass
class LogLine:
    """
    One line as it currently appears on the terminal.

    Attributes:
        session_id: Session that produced the line, or None for plain writes
                    and for lines whose session has ended
        content: Line text, including its terminator when complete
    """

    session_id: SessionId | None
    content: str

    @property
    def complete(self) -> bool:
        """True if the line ends with a terminator."""
        return is_complete_line(self.content)


def split_lines(text: str) -> list[str]:
    """
    Split text into line segments, keeping each terminator on its segment.

    Example:
        >>> split_lines("a\\nb\\nc")
        ['a\\n', 'b\\n', 'c']
        >>> split_lines("a\\n")
        ['a\\n']
    """
    return _SEGMENT_PATTERN.findall(text)


def update_history(
    handle: StreamHandle, session_id: SessionId | None, text: str
) -> None:
    """
    Record text written to a stream in the stream's history.

    No-op while no interactive session is active on the stream and no
    rewrite is in progress, so plain output is never accumulated when
    nobody needs to rewrite it.

    Args:
        handle: Stream whose history is updated
        session_id: Tag for new lines (None for plain writes)
        text: Raw chunk, possibly containing several lines
    """
    if not handle.active_sessions and handle.rewriting is None:
        return

    history = handle.history
    for segment in split_lines(text):
        if history and not history[-1].complete:
            history[-1].content += segment
        else:
            history.append(LogLine(session_id, segment))
