"""
Exception hierarchy for termledger.

All errors raised by the ledger are programmer errors (stale session
identifiers, unserialized rewrites, bad configuration). They are raised
immediately and never retried by the library.
"""

from typing import Any


class LedgerError(Exception):
    """
    Base exception for all termledger errors.

    Example:
        try:
            ledger.end_interactive_session(session_id)
        except LedgerError as e:
            lg.error(f"ledger error: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UnknownSessionError(LedgerError):
    """
    Raised when an operation references a session that is not active.

    The identifier was never minted by this stream's ledger, or the session
    it names has already ended.
    """

    def __init__(self, session: Any) -> None:
        super().__init__("Unknown interactive session ID", session=session)
        self.session = session


class ConcurrentRewriteError(LedgerError):
    """
    Raised when an interactive write is requested while another is in progress.

    Only one rewrite may be in flight per physical stream. Calling
    do_interactive_write() from inside a render callback lands here.
    """

    def __init__(self, session: Any, holder: Any) -> None:
        super().__init__(
            "Only 1 interactive write allowed at a time", session=session, holder=holder
        )
        self.session = session
        self.holder = holder


class ConfigError(LedgerError):
    """
    Configuration-related errors.

    Examples:
        - Non-positive refresh interval
        - Unreadable or malformed YAML file
        - Section value that is not a mapping
    """

    pass
