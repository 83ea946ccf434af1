"""Erasing and replacing substrings: all, first, last, n-th, head."""

from __future__ import annotations

import itertools
import re
from typing import Iterator


def _compile(sub: str, ignore_case: bool) -> re.Pattern[str]:
    return re.compile(re.escape(sub), re.IGNORECASE if ignore_case else 0)


def _spans(text: str, sub: str, ignore_case: bool, reverse: bool) -> Iterator[tuple[int, int]]:
    if not reverse:
        yield from (found.span() for found in _compile(sub, ignore_case).finditer(text))
        return
    flags = re.IGNORECASE if ignore_case else 0
    overlapping = [
        (found.start(1), found.end(1))
        for found in re.finditer(f"(?=({re.escape(sub)}))", text, flags)
    ]
    limit = len(text)
    for start, end in reversed(overlapping):
        if end <= limit:
            yield start, end
            limit = start


def _find_nth(text: str, sub: str, nth: int, ignore_case: bool) -> tuple[int, int] | None:
    if not sub:
        return None
    if nth >= 0:
        return next(itertools.islice(_spans(text, sub, ignore_case, False), nth, None), None)
    return next(itertools.islice(_spans(text, sub, ignore_case, True), -nth - 1, None), None)


def _replace_nth(text: str, sub: str, replacement: str, nth: int, ignore_case: bool) -> str:
    span = _find_nth(text, sub, nth, ignore_case)
    if span is None:
        return text
    start, end = span
    return text[:start] + replacement + text[end:]


def _replace_all(text: str, sub: str, replacement: str, ignore_case: bool) -> str:
    if not sub:
        return text
    return _compile(sub, ignore_case).sub(lambda _: replacement, text)


def erase_all(text: str, sub: str) -> str:
    """Remove every occurrence of ``sub``."""
    return _replace_all(text, sub, "", False)


def erase_first(text: str, sub: str) -> str:
    """Remove the first occurrence of ``sub``."""
    return _replace_nth(text, sub, "", 0, False)


def erase_last(text: str, sub: str) -> str:
    """Remove the last occurrence of ``sub``."""
    return _replace_nth(text, sub, "", -1, False)


def ierase_all(text: str, sub: str) -> str:
    """Remove every occurrence of ``sub``, ignoring case."""
    return _replace_all(text, sub, "", True)


def ierase_nth(text: str, sub: str, nth: int) -> str:
    """Remove the ``nth`` occurrence of ``sub`` ignoring case.

    ``nth`` counts from 0; a negative value counts from the end, -1 being the last.
    """
    return _replace_nth(text, sub, "", nth, True)


def replace_all(text: str, sub: str, replacement: str) -> str:
    """Replace every occurrence of ``sub`` with ``replacement``."""
    return _replace_all(text, sub, replacement, False)


def replace_first(text: str, sub: str, replacement: str) -> str:
    """Replace the first occurrence of ``sub`` with ``replacement``."""
    return _replace_nth(text, sub, replacement, 0, False)


def replace_head(text: str, count: int, replacement: str) -> str:
    """Replace the first ``count`` characters with ``replacement``.

    A negative ``count`` replaces all but the last ``-count`` characters.
    """
    head = count if count >= 0 else max(len(text) + count, 0)
    return replacement + text[head:]