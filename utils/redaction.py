"""Helpers for keeping credentials out of log output"""

from typing import Optional

VISIBLE_PREFIX = 6


def redact(token: Optional[str]) -> str:
    """Shorten a token to a recognisable prefix

    Args:
        token: Token to redact

    Returns:
        Prefix followed by an ellipsis, or a marker for empty values
    """
    if not token:
        return "<empty>"
    if len(token) <= VISIBLE_PREFIX:
        return "[REDACTED]"
    return f"{token[:VISIBLE_PREFIX]}..."
