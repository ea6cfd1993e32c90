"""A last-in, first-out stack backed by a Python list."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack; index 0 is the bottom and the last index is the top."""

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = list(items)

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._data.append(item)

    def push_all(self, items: Iterable[T]) -> None:
        """Push items in order, so the last one ends up on top."""
        self._data.extend(items)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("pop from an empty Stack")
        return self._data.pop()

    def peek(self) -> T:
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._data:
            raise IndexError("peek at an empty Stack")
        return self._data[-1]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._data)

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._data):
            raise IndexError("Stack index out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._data[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._data[index] = item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._data.clear()

    def to_list(self) -> list[T]:
        """Return the items, bottom to top, as a new list."""
        return list(self._data)

    def filter(self, predicate: Callable[[T], Any]) -> Stack[T]:
        """Return a new stack with the items that satisfy the predicate."""
        return Stack(item for item in self._data if predicate(item))

    def map(self, transform: Callable[[T], T]) -> Stack[T]:
        """Return a new stack with every item transformed."""
        return Stack(transform(item) for item in self._data)

    def copy(self) -> Stack[T]:
        """Return an independent copy of the stack."""
        return Stack(self._data)

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        self._data.reverse()

    def remove_at(self, index: int) -> T:
        """Remove and return the item at index; raise IndexError if out of range."""
        self._check_index(index)
        return self._data.pop(index)

    def insert_at(self, index: int, item: T) -> None:
        """Insert an item at index, 0 to len inclusive; raise IndexError otherwise."""
        if index < 0 or index > len(self._data):
            raise IndexError("Stack index out of range")
        self._data.insert(index, item)

    def index_of(self, item: T) -> int:
        """Return the index of the first occurrence; raise ValueError if absent."""
        for index, element in enumerate(self._data):
            if element == item:
                return index
        raise ValueError(f"{item!r} is not in Stack")

    def last_index_of(self, item: T) -> int:
        """Return the index of the last occurrence; raise ValueError if absent."""
        for index in range(len(self._data) - 1, -1, -1):
            if self._data[index] == item:
                return index
        raise ValueError(f"{item!r} is not in Stack")

    def remove(self, item: T) -> None:
        """Remove the first occurrence of an item; raise ValueError if absent."""
        try:
            self._data.remove(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in Stack") from None

    def remove_all(self, item: T) -> int:
        """Remove every occurrence of an item and return how many were removed."""
        kept = [element for element in self._data if element != item]
        removed = len(self._data) - len(kept)
        self._data[:] = kept
        return removed

    def sort(
        self, key: Optional[Callable[[T], Any]] = None, reverse: bool = False
    ) -> None:
        """Sort the items in place, bottom first; the sort is stable."""
        self._data.sort(key=key, reverse=reverse)

    def take(self, n: int) -> list[T]:
        """Return the top n items, bottom to top, without removing them."""
        if n <= 0:
            return []
        if n >= len(self._data):
            return list(self._data)
        return self._data[-n:]

    def drop(self, n: int) -> int:
        """Remove up to n items from the top and return how many were removed."""
        if n <= 0:
            return 0
        removed = min(n, len(self._data))
        del self._data[len(self._data) - removed:]
        return removed