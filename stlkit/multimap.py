"""A mapping that keeps a list of values for every key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """One key-value pair of a multimap."""

    key: K
    value: V


def _same_values(first: list[Any], second: list[Any]) -> bool:
    """Return True if both lists hold the same values, ignoring order."""
    if len(first) != len(second):
        return False
    remaining = list(second)
    for value in first:
        try:
            remaining.remove(value)
        except ValueError:
            return False
    return not remaining


class MultiMap(Generic[K, V]):
    """A map from hashable keys to lists of values, in insertion order."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[K, list[V]] = {}

    def put(self, key: K, value: V) -> None:
        """Append a value to the values of key."""
        self._data.setdefault(key, []).append(value)

    def put_all(self, key: K, values: Iterable[V]) -> None:
        """Append several values, in order, to the values of key."""
        self._data.setdefault(key, []).extend(values)

    def get(self, key: K) -> list[V]:
        """Return a copy of the values of key; an empty list if key is absent."""
        return list(self._data.get(key, ()))

    def get_first(self, key: K) -> V:
        """Return the first value of key; raise KeyError if there is none."""
        values = self._data.get(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def get_last(self, key: K) -> V:
        """Return the last value of key; raise KeyError if there is none."""
        values = self._data.get(key)
        if not values:
            raise KeyError(key)
        return values[-1]

    def remove(self, key: K, value: V) -> None:
        """Remove the first occurrence of value under key.

        The key disappears once its last value is removed. Raises KeyError if
        the pair is not stored.
        """
        values = self._data.get(key)
        if values is None:
            raise KeyError(key)
        try:
            values.remove(value)
        except ValueError:
            raise KeyError((key, value)) from None
        if not values:
            del self._data[key]

    def remove_all(self, key: K) -> None:
        """Remove key and every value it holds; raise KeyError if absent."""
        try:
            del self._data[key]
        except KeyError:
            raise KeyError(key) from None

    def contains_key(self, key: K) -> bool:
        """Return True if key is stored."""
        return key in self._data

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def contains_value(self, value: V) -> bool:
        """Return True if some key holds value."""
        return any(value in values for values in self._data.values())

    def contains_entry(self, key: K, value: V) -> bool:
        """Return True if key holds value."""
        return value in self._data.get(key, ())

    def __len__(self) -> int:
        return sum(len(values) for values in self._data.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiMap):
            return NotImplemented
        if len(self._data) != len(other._data):
            return False
        return all(
            _same_values(values, other.get(key)) for key, values in self._data.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MultiMap({self._data!r})"

    def key_count(self) -> int:
        """Return the number of distinct keys."""
        return len(self._data)

    def value_count(self, key: K) -> int:
        """Return the number of values held by key."""
        return len(self._data.get(key, ()))

    def clear(self) -> None:
        """Remove every key and value."""
        self._data.clear()

    def keys(self) -> list[K]:
        """Return the keys as a new list."""
        return list(self._data)

    def values(self) -> list[V]:
        """Return every value of every key as a new list."""
        return [value for values in self._data.values() for value in values]

    def unique_values(self) -> list[V]:
        """Return the distinct values, each once."""
        result: list[V] = []
        for value in self.values():
            if value not in result:
                result.append(value)
        return result

    def entries(self) -> list[Entry[K, V]]:
        """Return every key-value pair."""
        return [
            Entry(key, value)
            for key, values in self._data.items()
            for value in values
        ]

    def to_dict(self) -> dict[K, V]:
        """Return a mapping of each key to its last value."""
        return {key: values[-1] for key, values in self._data.items() if values}

    def to_dict_of_lists(self) -> dict[K, list[V]]:
        """Return a mapping of each key to a copy of its values."""
        return {key: list(values) for key, values in self._data.items()}

    def filter(self, predicate: Callable[[K, V], Any]) -> MultiMap[K, V]:
        """Return a multimap with the pairs that satisfy the predicate."""
        result: MultiMap[K, V] = MultiMap()
        for key, values in self._data.items():
            for value in values:
                if predicate(key, value):
                    result.put(key, value)
        return result

    def filter_keys(self, predicate: Callable[[K], Any]) -> MultiMap[K, V]:
        """Return a multimap with the keys, and their values, satisfying the predicate."""
        result: MultiMap[K, V] = MultiMap()
        for key, values in self._data.items():
            if predicate(key):
                for value in values:
                    result.put(key, value)
        return result

    def filter_values(self, predicate: Callable[[V], Any]) -> MultiMap[K, V]:
        """Return a multimap with the values that satisfy the predicate."""
        return self.filter(lambda _key, value: predicate(value))

    def copy(self) -> MultiMap[K, V]:
        """Return an independent copy."""
        return self.filter(lambda _key, _value: True)

    def sorted_keys(
        self, key: Optional[Callable[[K], Any]] = None, reverse: bool = False
    ) -> list[K]:
        """Return the keys sorted, by the key function if given."""
        return sorted(self._data, key=key, reverse=reverse)

    def sorted_values(
        self,
        map_key: K,
        key: Optional[Callable[[V], Any]] = None,
        reverse: bool = False,
    ) -> list[V]:
        """Return the values of map_key sorted, by the key function if given."""
        return sorted(self.get(map_key), key=key, reverse=reverse)