"""Token normalization for enum-like feed values."""

from __future__ import annotations


def to_token(text: str) -> str:
    """Convert a display string into a lowercase, dash-separated token.

    Only the first space is replaced, so ``"Out Of Control"`` becomes
    ``"out-of control"``.  Published consumers of the feed already match
    on these tokens.
    """
    return text.replace(" ", "-", 1).lower()
