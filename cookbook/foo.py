"""A value holder with a null check and a method that always fails."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Foo:
    """Wraps an integer; compares and converts as that integer."""

    val: int

    def __int__(self) -> int:
        return self.val

    def is_not_null(self) -> bool:
        """True when the held value is not zero."""
        return self.val != 0

    def throws(self) -> None:
        """Always raise :class:`ValueError`."""
        raise ValueError("Expected exception")