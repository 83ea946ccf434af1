"""Turning heterogeneous sequences into strings and splitting them by element kind."""

from __future__ import annotations

import numbers
from typing import Any, Iterable


class Cat:
    """A value whose text form is a meow."""

    def __str__(self) -> str:
        return "Meow! "

    def __repr__(self) -> str:
        return "Cat()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Cat)

    def __hash__(self) -> int:
        return hash(Cat)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, ".17g")
    return str(value)


def stringize(sequence: Iterable[Any]) -> str:
    """Concatenate the text form of every element of ``sequence``."""
    return "".join(_to_text(value) for value in sequence)


def _is_arithmetic(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def get_arithmetics(sequence: Iterable[Any]) -> tuple[Any, ...]:
    """Return the numeric (integer, boolean or floating point) elements, in order."""
    return tuple(value for value in sequence if _is_arithmetic(value))


def get_nonarithmetics(sequence: Iterable[Any]) -> tuple[Any, ...]:
    """Return the elements that are not numbers, in order."""
    return tuple(value for value in sequence if not _is_arithmetic(value))