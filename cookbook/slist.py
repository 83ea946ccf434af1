"""A singly linked list whose node references stay valid across other changes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: "_Node | None" = None) -> None:
        self.value = value
        self.next = next_node

    def __repr__(self) -> str:
        return f"<node {self.value!r}>"


class SList:
    """A singly linked list with insertion and removal at the front or after a node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value; raises IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def find(self, value: Any) -> _Node | None:
        """Return the first node holding ``value``, or None."""
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def erase_after(self, node: _Node) -> Any:
        """Remove the node following ``node`` and return its value."""
        removed = node.next
        if removed is None:
            raise ValueError("no element after the given node")
        node.next = removed.next
        self._size -= 1
        return removed.value

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"


def run_list_test(size: int = 1000000, prefix_count: int = 1000) -> SList:
    """Exercise the list: the node found for 777 must survive changes elsewhere.

    Builds ``size`` zeros, pushes 0 .. ``prefix_count - 1`` in front, finds 777,
    pops 100 values, pushes -100 .. 9, then erases the value after 777.
    """
    values = SList([0] * size)
    for number in range(prefix_count):
        values.push_front(number)
    node = values.find(777)
    if node is None:
        raise LookupError("777 is not in the list")
    for _ in range(100):
        values.pop_front()
    for number in range(-100, 10):
        values.push_front(number)
    if node.value != 777 or node.next is None or node.next.value != 776:
        raise RuntimeError("node reference was invalidated")
    values.erase_after(node)
    return values