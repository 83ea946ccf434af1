"""A collection of people indexed by name, id, height and weight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    height: int
    weight: int


class PersonIndex:
    """People with unique names, looked up or ordered by several keys."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._by_name: dict[str, Person] = {}
        self._by_id: dict[int, list[Person]] = {}
        for person in persons:
            self.insert(person)

    def insert(self, person: Person) -> bool:
        """Add ``person``; returns False if someone with that name is already present."""
        if person.name in self._by_name:
            return False
        self._by_name[person.name] = person
        self._by_id.setdefault(person.id, []).append(person)
        return True

    def by_name(self) -> list[Person]:
        """Everyone, ordered by name."""
        return [self._by_name[name] for name in sorted(self._by_name)]

    def by_id(self) -> list[Person]:
        """Everyone, people sharing an id next to each other."""
        return [person for group in self._by_id.values() for person in group]

    def by_height(self) -> list[Person]:
        """Everyone, ordered by height; equal heights keep insertion order."""
        return sorted(self._by_name.values(), key=lambda person: person.height)

    def by_weight(self) -> list[Person]:
        """Everyone, ordered by weight; equal weights keep insertion order."""
        return sorted(self._by_name.values(), key=lambda person: person.weight)

    def find_name(self, name: str) -> Person:
        """Return the person called ``name``; raises KeyError if absent."""
        return self._by_name[name]

    def find_id(self, person_id: int) -> Person:
        """Return the first person inserted with ``person_id``; raises KeyError if absent."""
        try:
            return self._by_id[person_id][0]
        except KeyError:
            raise KeyError(person_id) from None

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Person):
            return item.name in self._by_name
        return item in self._by_name

    def __iter__(self) -> Iterator[Person]:
        return iter(self.by_name())

    def __len__(self) -> int:
        return len(self._by_name)