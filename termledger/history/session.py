"""
Interactive session identifiers.

A SessionId is an opaque token minted by LogHistory.begin_interactive_session().
Equality is identity: two identifiers are equal only if they are the same
object, so a token cannot be forged by constructing one with a known serial.
"""

import itertools
import threading

_counter = itertools.count(1)
_counter_lock = threading.Lock()


class SessionId:
    """Opaque, process-unique interactive session token."""

    __slots__ = ("_serial",)

    def __init__(self, serial: int) -> None:
        self._serial = serial

    @property
    def serial(self) -> int:
        """Minting order of this identifier (debugging aid only)."""
        return self._serial

    def __repr__(self) -> str:
        return f"SessionId({self._serial})"


def mint_session_id() -> SessionId:
    """Create a new, never before seen session identifier."""
    with _counter_lock:
        serial = next(_counter)
    return SessionId(serial)
