"""A small library surface: a function, a class whose method fails, and number parsing."""

from __future__ import annotations

import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class BarError(Exception):
    """Raised by :meth:`Bar.meow`."""


def foo() -> int:
    """Return zero."""
    return 0


class Bar:
    """An object whose only method always fails."""

    def meow(self) -> int:
        raise BarError("meow")


def to_int(text: str, length: int) -> int:
    """Parse the first ``length`` characters of ``text`` as a 32-bit integer.

    Raises :class:`ValueError` if they are not a whole integer or it is out of range.
    """
    if length < 0 or length > len(text):
        raise ValueError(f"length {length} is outside the text")
    piece = text[:length]
    if not _INTEGER.fullmatch(piece):
        raise ValueError(f"bad lexical cast: {piece!r} is not an integer")
    value = int(piece)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"bad lexical cast: {piece!r} is out of range")
    return value