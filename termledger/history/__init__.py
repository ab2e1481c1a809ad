"""
Line history ledger and interactive rewrite protocol.
"""

from .ledger import LogHistory
from .lines import LogLine, split_lines, update_history
from .registry import StreamHandle, StreamRegistry
from .session import SessionId, mint_session_id

__all__ = [
    "LogHistory",
    "LogLine",
    "SessionId",
    "StreamHandle",
    "StreamRegistry",
    "mint_session_id",
    "split_lines",
    "update_history",
]
