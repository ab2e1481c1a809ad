"""
Writable stream that forwards its input to a log function.

Useful when a program runs a child process and wants its output to reach the
user through the logger (and therefore through the ledger) instead of being
written to the terminal directly:

    pipe = LogPipe(logging.getLogger("build").info)
    proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, text=True)
    for chunk in proc.stdout:
        pipe.write(chunk)
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

from .constants import LedgerConstants
from .control import is_complete_line


class LogPipe(io.TextIOBase):
    """
    Text stream calling `log_fn` once per non-empty chunk.

    A single trailing line terminator is removed before the chunk is logged,
    because the logger adds its own. Escape sequences written after that
    terminator (e.g. a color reset) are kept.
    """

    def __init__(self, log_fn: Callable[[str], Any]) -> None:
        """
        Initialize the pipe.

        Args:
            log_fn: Function receiving each chunk (e.g. logger.info)
        """
        super().__init__()
        if not callable(log_fn):
            raise TypeError(f"log_fn must be callable, got {type(log_fn).__name__}")
        self._log_fn = log_fn

    def writable(self) -> bool:
        return True

    def write(self, chunk: Any) -> int:
        """Log a chunk. Returns the number of characters accepted."""
        if self.closed:
            raise ValueError("I/O operation on closed LogPipe")

        text = (
            bytes(chunk).decode("utf-8", errors="replace")
            if isinstance(chunk, (bytes, bytearray))
            else str(chunk)
        )
        if text == "":
            return 0

        size = len(text)
        if is_complete_line(text):
            text = _remove_last_eol(text)
        self._log_fn(text)
        return size


def _remove_last_eol(text: str) -> str:
    """Remove the last line terminator while keeping what follows it."""
    idx = text.rfind(LedgerConstants.EOL)
    return text[:idx] + text[idx + len(LedgerConstants.EOL) :]
