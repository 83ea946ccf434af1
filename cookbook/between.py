"""Extracting the text between two delimiter characters."""

from __future__ import annotations


def between(text: str, starts: str, ends: str) -> str:
    """Return the text after the first ``starts`` up to the next ``ends``.

    Without ``starts`` the result is empty; without a following ``ends``
    it runs to the end of ``text``.
    """
    _, found, tail = text.partition(starts)
    if not found:
        return ""
    return tail.partition(ends)[0]