"""A collection that counts how many times each element occurs."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class MultiSet(Generic[T]):
    """A bag of hashable elements, each stored with its number of occurrences."""

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: dict[T, int] = {}
        for item in items:
            self.add(item)

    def add(self, element: T, count: int = 1) -> None:
        """Add count occurrences of an element; a count below one adds nothing."""
        if count > 0:
            self._data[element] = self._data.get(element, 0) + count

    def remove(self, element: T, count: int = 1) -> None:
        """Remove up to count occurrences of an element.

        Raises KeyError if the element is absent and ValueError if count is
        not positive.
        """
        if count < 1:
            raise ValueError("count must be positive")
        current = self._data.get(element)
        if current is None:
            raise KeyError(element)
        if count >= current:
            del self._data[element]
        else:
            self._data[element] = current - count

    def remove_all(self, element: T) -> None:
        """Remove every occurrence of an element; raise KeyError if absent."""
        try:
            del self._data[element]
        except KeyError:
            raise KeyError(element) from None

    def count(self, element: T) -> int:
        """Return the number of occurrences of an element."""
        return self._data.get(element, 0)

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def __len__(self) -> int:
        return sum(self._data.values())

    def __iter__(self) -> Iterator[T]:
        for element, count in self._data.items():
            for _ in range(count):
                yield element

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiSet):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MultiSet({self._data!r})"

    def unique_count(self) -> int:
        """Return the number of distinct elements."""
        return len(self._data)

    def clear(self) -> None:
        """Remove every element."""
        self._data.clear()

    def to_list(self) -> list[T]:
        """Return every occurrence of every element as a new list."""
        return list(self)

    def unique(self) -> list[T]:
        """Return the distinct elements as a new list."""
        return list(self._data)

    def to_dict(self) -> dict[T, int]:
        """Return a new mapping of each element to its count."""
        return dict(self._data)

    def union(self, other: MultiSet[T]) -> MultiSet[T]:
        """Return a multiset whose counts are the sums of both counts."""
        result = self.copy()
        for element, count in other._data.items():
            result.add(element, count)
        return result

    def intersection(self, other: MultiSet[T]) -> MultiSet[T]:
        """Return a multiset with the smaller count of each shared element."""
        result: MultiSet[T] = MultiSet()
        for element, count in self._data.items():
            if element in other._data:
                result.add(element, min(count, other._data[element]))
        return result

    def difference(self, other: MultiSet[T]) -> MultiSet[T]:
        """Return a multiset with this set's counts less those of other."""
        result: MultiSet[T] = MultiSet()
        for element, count in self._data.items():
            result.add(element, count - other.count(element))
        return result

    def is_subset(self, other: MultiSet[T]) -> bool:
        """Return True if other holds every element at least as often."""
        return all(other.count(e) >= c for e, c in self._data.items())

    def is_superset(self, other: MultiSet[T]) -> bool:
        """Return True if this set holds every element of other at least as often."""
        return other.is_subset(self)

    def copy(self) -> MultiSet[T]:
        """Return an independent copy."""
        result: MultiSet[T] = MultiSet()
        result._data = dict(self._data)
        return result

    def filter(self, predicate: Callable[[T], Any]) -> MultiSet[T]:
        """Return a multiset with the elements, and counts, satisfying the predicate."""
        result: MultiSet[T] = MultiSet()
        result._data = {e: c for e, c in self._data.items() if predicate(e)}
        return result

    def _ranked(self, n: int, least: bool) -> list[T]:
        if n <= 0:
            return []
        ordered = sorted(self._data.items(), key=lambda pair: pair[1], reverse=not least)
        return [element for element, _ in ordered[:n]]

    def most_common(self, n: int) -> list[T]:
        """Return up to n elements, most frequent first."""
        return self._ranked(n, least=False)

    def least_common(self, n: int) -> list[T]:
        """Return up to n elements, least frequent first."""
        return self._ranked(n, least=True)