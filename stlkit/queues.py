"""A first-in, first-out queue and a binary-heap priority queue."""

from __future__ import annotations

import operator
from collections import deque
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO queue; index 0 is the front and the last index is the back."""

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        self._data.append(item)

    def enqueue_all(self, items: Iterable[T]) -> None:
        """Add items at the back, in order."""
        self._data.extend(items)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("dequeue from an empty Queue")
        return self._data.popleft()

    def peek(self) -> T:
        """Return the front item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("peek at an empty Queue")
        return self._data[0]

    def peek_back(self) -> T:
        """Return the back item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("peek at an empty Queue")
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
            raise IndexError("Queue index out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._data[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._data[index] = item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Queue({list(self._data)!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._data.clear()

    def to_list(self) -> list[T]:
        """Return the items, front to back, as a new list."""
        return list(self._data)

    def filter(self, predicate: Callable[[T], Any]) -> Queue[T]:
        """Return a new queue with the items that satisfy the predicate."""
        return Queue(item for item in self._data if predicate(item))

    def map(self, transform: Callable[[T], T]) -> Queue[T]:
        """Return a new queue with every item transformed."""
        return Queue(transform(item) for item in self._data)

    def copy(self) -> Queue[T]:
        """Return an independent copy."""
        return Queue(self._data)

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        self._data.reverse()

    def remove_at(self, index: int) -> T:
        """Remove and return the item at index; raise IndexError if out of range."""
        self._check_index(index)
        item = self._data[index]
        del self._data[index]
        return item

    def insert_at(self, index: int, item: T) -> None:
        """Insert an item at index, 0 to len inclusive; raise IndexError otherwise."""
        if index < 0 or index > len(self._data):
            raise IndexError("Queue index out of range")
        self._data.insert(index, item)

    def index_of(self, item: T) -> int:
        """Return the index of the first occurrence; raise ValueError if absent."""
        for index, element in enumerate(self._data):
            if element == item:
                return index
        raise ValueError(f"{item!r} is not in Queue")

    def last_index_of(self, item: T) -> int:
        """Return the index of the last occurrence; raise ValueError if absent."""
        last = len(self._data) - 1
        for offset, element in enumerate(reversed(self._data)):
            if element == item:
                return last - offset
        raise ValueError(f"{item!r} is not in Queue")

    def remove(self, item: T) -> None:
        """Remove the first occurrence of an item; raise ValueError if absent."""
        try:
            self._data.remove(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in Queue") from None

    def remove_all(self, item: T) -> int:
        """Remove every occurrence of an item and return how many were removed."""
        kept = [element for element in self._data if element != item]
        removed = len(self._data) - len(kept)
        self._data = deque(kept)
        return removed

    def sort(
        self, key: Optional[Callable[[T], Any]] = None, reverse: bool = False
    ) -> None:
        """Sort the items in place, front first; the sort is stable."""
        self._data = deque(sorted(self._data, key=key, reverse=reverse))

    def take(self, n: int) -> list[T]:
        """Return the first n items without removing them."""
        if n <= 0:
            return []
        return [item for _, item in zip(range(n), self._data)]

    def drop(self, n: int) -> int:
        """Remove up to n items from the front and return how many were removed."""
        if n <= 0:
            return 0
        removed = min(n, len(self._data))
        for _ in range(removed):
            self._data.popleft()
        return removed


class PriorityQueue(Generic[T]):
    """A binary heap; the item that is "less" than all others comes out first."""

    __slots__ = ("_data", "less")

    def __init__(
        self,
        less: Optional[Callable[[T, T], bool]] = None,
        items: Iterable[T] = (),
    ) -> None:
        self.less: Callable[[T, T], bool] = less if less is not None else operator.lt
        self._data: list[T] = []
        for item in items:
            self.enqueue(item)

    def enqueue(self, item: T) -> None:
        """Add an item."""
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def dequeue(self) -> T:
        """Remove and return the highest-priority item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("dequeue from an empty PriorityQueue")
        item = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return item

    def peek(self) -> T:
        """Return the highest-priority item; raise IndexError if empty."""
        if not self._data:
            raise IndexError("peek at an empty PriorityQueue")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._data!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._data.clear()

    def to_list(self) -> list[T]:
        """Return the items in heap order as a new list."""
        return list(self._data)

    def copy(self) -> PriorityQueue[T]:
        """Return an independent copy with the same ordering function."""
        result: PriorityQueue[T] = PriorityQueue(self.less)
        result._data = list(self._data)
        return result

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not self.less(data[index], data[parent]):
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self.less(data[child], data[best]):
                    best = child
            if best == index:
                return
            data[index], data[best] = data[best], data[index]
            index = best