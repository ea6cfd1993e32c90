"""An unordered collection of unique, hashable elements."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class HashSet(Generic[T]):
    """A set of unique elements with set algebra and functional helpers."""

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: dict[T, None] = dict.fromkeys(items)

    def add(self, element: T) -> None:
        """Add an element; adding an existing element has no effect."""
        self._data[element] = None

    def remove(self, element: T) -> None:
        """Remove an element if present; a missing element is ignored."""
        self._data.pop(element, None)

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return len(self) == len(other) and self.is_subset(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HashSet({list(self._data)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._data.clear()

    def to_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self._data)

    def union(self, other: HashSet[T]) -> HashSet[T]:
        """Return a set with the elements of both sets."""
        result = self.copy()
        for element in other:
            result.add(element)
        return result

    def intersection(self, other: HashSet[T]) -> HashSet[T]:
        """Return a set with the elements present in both sets."""
        return HashSet(element for element in self._data if element in other)

    def difference(self, other: HashSet[T]) -> HashSet[T]:
        """Return a set with the elements of this set that are not in other."""
        return HashSet(element for element in self._data if element not in other)

    def symmetric_difference(self, other: HashSet[T]) -> HashSet[T]:
        """Return a set with the elements in exactly one of the two sets."""
        return self.union(other).difference(self.intersection(other))

    def is_subset(self, other: HashSet[T]) -> bool:
        """Return True if every element of this set is in other."""
        return all(element in other for element in self._data)

    def is_superset(self, other: HashSet[T]) -> bool:
        """Return True if every element of other is in this set."""
        return other.is_subset(self)

    def is_disjoint(self, other: HashSet[T]) -> bool:
        """Return True if the two sets share no element."""
        return not any(element in other for element in self._data)

    def copy(self) -> HashSet[T]:
        """Return an independent copy of the set."""
        return HashSet(self._data)

    def filter(self, predicate: Callable[[T], Any]) -> HashSet[T]:
        """Return a set with the elements that satisfy the predicate."""
        return HashSet(element for element in self._data if predicate(element))

    def any(self, predicate: Callable[[T], Any]) -> bool:
        """Return True if some element satisfies the predicate."""
        return any(predicate(element) for element in self._data)

    def all(self, predicate: Callable[[T], Any]) -> bool:
        """Return True if every element satisfies the predicate."""
        return all(predicate(element) for element in self._data)