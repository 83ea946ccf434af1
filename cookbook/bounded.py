"""Sequences with a fixed upper bound on their size."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Iterable, TypeVar, overload

T = TypeVar("T")


class CapacityError(MemoryError):
    """Raised when an item is added to a full :class:`StaticVector`."""


class StaticVector(Sequence[T]):
    """A sequence that holds at most ``capacity`` items."""

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []
        for item in items:
            self.append(item)

    def append(self, item: T) -> None:
        """Add ``item`` at the end; raises :class:`CapacityError` when full."""
        if len(self._items) >= self.capacity:
            raise CapacityError(f"static vector is full ({self.capacity} items)")
        self._items.append(item)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StaticVector):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"StaticVector({self.capacity}, {self._items!r})"


def collect_operations(
    has_operation: Callable[[], bool], get_operation: Callable[[], T]
) -> list[T]:
    """Gather operations for as long as ``has_operation()`` says there are more."""
    operations: list[T] = []
    while has_operation():
        operations.append(get_operation())
    return operations