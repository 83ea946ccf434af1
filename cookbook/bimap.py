"""A bidirectional map: unique left keys, non-unique right keys."""

from __future__ import annotations

from typing import Any, Hashable, Iterable


class BiMap:
    """Maps left keys to right keys and back.

    A left key appears at most once; a right key may be shared by several
    left keys, which are then kept in insertion order.
    """

    def __init__(self, pairs: Iterable[tuple[Any, Any]] = ()) -> None:
        self._left: dict[Hashable, Any] = {}
        self._right: dict[Hashable, list[Any]] = {}
        for left, right in pairs:
            self.insert(left, right)

    def insert(self, left: Any, right: Any) -> bool:
        """Add the pair; returns False and changes nothing if ``left`` is already present."""
        if left in self._left:
            return False
        self._left[left] = right
        self._right.setdefault(right, []).append(left)
        return True

    def left_items(self) -> list[tuple[Any, Any]]:
        """Pairs ``(left, right)`` ordered by left key."""
        return [(left, self._left[left]) for left in sorted(self._left)]

    def right_items(self) -> list[tuple[Any, Any]]:
        """Pairs ``(right, left)`` ordered by right key."""
        return [(right, left) for right in sorted(self._right) for left in self._right[right]]

    def find_left(self, key: Any) -> Any:
        """Return the right key paired with left ``key``; raises KeyError if absent."""
        return self._left[key]

    def find_right(self, key: Any) -> Any:
        """Return the first left key paired with right ``key``; raises KeyError if absent."""
        try:
            return self._right[key][0]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        left, right = pair
        return left in self._left and self._left[left] == right

    def __len__(self) -> int:
        return len(self._left)