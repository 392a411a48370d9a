"""Bubble sort and insertion sort, in place, with an optional key."""

import bisect
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Person:
    """A person, ordered by age, then last name, then first name."""

    age: int
    first_name: str
    last_name: str

    def sort_key(self) -> tuple[int, str, str]:
        """Return the tuple that people are sorted by."""
        return (self.age, self.last_name, self.first_name)


KeyFunc = Optional[Callable[[Any], Any]]


def _identity(item: Any) -> Any:
    return item


def bubble_sort(items: MutableSequence, key: KeyFunc = None) -> None:
    """Sort ``items`` in place by bubble sort; stable, O(N^2)."""
    key = key or _identity
    size = len(items)
    for sweep in range(size):
        swapped = False
        for i in range(size - 1 - sweep):
            if key(items[i + 1]) < key(items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence, key: KeyFunc = None) -> None:
    """Sort ``items`` in place by insertion sort; stable."""
    key = key or _identity
    ordered: list = []
    keys: list = []
    for item in items:
        item_key = key(item)
        position = bisect.bisect_right(keys, item_key)
        keys.insert(position, item_key)
        ordered.insert(position, item)
    items[:] = ordered


def bubble_sort_people(people: MutableSequence[Person]) -> None:
    """Bubble-sort ``people`` in place by age, last name, then first name."""
    bubble_sort(people, key=Person.sort_key)


def insertion_sort_people(people: MutableSequence[Person]) -> None:
    """Insertion-sort ``people`` in place by age, last name, then first name."""
    insertion_sort(people, key=Person.sort_key)