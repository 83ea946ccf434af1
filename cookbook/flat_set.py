"""A set kept as a sorted list."""

from __future__ import annotations

import bisect
from typing import Any, Iterable, Iterator


class FlatSet:
    """A sorted set stored contiguously; positions are list indices."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = sorted(set(values))

    def insert(self, value: Any) -> bool:
        """Add ``value``; returns False if it was already present."""
        index = bisect.bisect_left(self._items, value)
        if index < len(self._items) and self._items[index] == value:
            return False
        self._items.insert(index, value)
        return True

    def erase(self, value: Any) -> int:
        """Remove ``value``; returns the number of elements removed (0 or 1)."""
        index = bisect.bisect_left(self._items, value)
        if index < len(self._items) and self._items[index] == value:
            del self._items[index]
            return 1
        return 0

    def lower_bound(self, value: Any) -> int:
        """Index of the first element not less than ``value`` (``len(self)`` if none)."""
        return bisect.bisect_left(self._items, value)

    def find(self, value: Any) -> int:
        """Index of ``value``; raises ValueError if it is not present."""
        index = self.lower_bound(value)
        if index < len(self._items) and self._items[index] == value:
            return index
        raise ValueError(f"{value!r} is not in the set")

    def __contains__(self, value: object) -> bool:
        index = bisect.bisect_left(self._items, value)
        return index < len(self._items) and self._items[index] == value

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"FlatSet({self._items!r})"