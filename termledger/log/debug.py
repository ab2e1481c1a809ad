"""
DEBUG environment variable namespace matching.

DEBUG holds namespaces separated by spaces or commas:

    DEBUG="*"               every namespace
    DEBUG="app.db"          exactly "app.db"
    DEBUG="app.*,worker"    "app", anything under "app", and "worker"

Both "." (logger names) and ":" act as namespace separators.
"""

from __future__ import annotations

import os
import re

_SPLIT = re.compile(r"[ ,]")
_SEPARATORS = (".", ":")


def _matches(pattern: str, namespace: str) -> bool:
    if pattern == "*":
        return True
    for sep in _SEPARATORS:
        wildcard = sep + "*"
        if pattern.endswith(wildcard):
            prefix = pattern[: -len(wildcard)]
            return namespace == prefix or any(
                namespace.startswith(prefix + s) for s in _SEPARATORS
            )
    return namespace == pattern


def is_debug_namespace(namespace: str, debug: str | None = None) -> bool:
    """
    Check whether a namespace is flagged for debugging.

    Args:
        namespace: Namespace to test, typically a logger name
        debug: Namespace list to test against (default: $DEBUG)

    Returns:
        True if any listed pattern matches the namespace
    """
    if debug is None:
        debug = os.environ.get("DEBUG", "")
    patterns = [p for p in _SPLIT.split(debug) if p]
    return any(_matches(p, namespace) for p in patterns)
