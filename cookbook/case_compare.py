"""Case-insensitive string comparison."""

from __future__ import annotations


def iequals(first: str, second: str) -> bool:
    """Return True if the strings are equal when compared character by character, ignoring case."""
    return len(first) == len(second) and all(
        a.lower() == b.lower() for a, b in zip(first, second)
    )