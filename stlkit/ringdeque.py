"""A double-ended queue stored in a growable circular buffer."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_DEFAULT_CAPACITY = 16


def _next_power_of_two(n: int) -> int:
    return 1 << (n - 1).bit_length()


class Deque(Generic[T]):
    """A deque with indexed access, backed by a ring buffer that doubles when full."""

    __slots__ = ("_data", "_front", "_back", "_size")

    def __init__(
        self, items: Iterable[T] = (), capacity: Optional[int] = None
    ) -> None:
        initial = list(items)
        if capacity is None:
            capacity = _next_power_of_two(len(initial)) if initial else _DEFAULT_CAPACITY
        elif capacity <= 0:
            capacity = _DEFAULT_CAPACITY
        self._data: list[Any] = [None] * capacity
        self._front = 0
        self._back = 0
        self._size = 0
        for item in initial:
            self.push_back(item)

    def _slot(self, index: int) -> int:
        return (self._front + index) % len(self._data)

    def _relocate(self, capacity: int) -> None:
        items = list(self)
        self._data = items + [None] * (capacity - len(items))
        self._front = 0
        self._back = self._size % capacity if capacity else 0

    def _ensure_room(self) -> None:
        if self._size == len(self._data):
            self._relocate(max(1, 2 * len(self._data)))

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError("Deque index out of range")

    def push_front(self, element: T) -> None:
        """Add an element at the front."""
        self._ensure_room()
        self._front = (self._front - 1) % len(self._data)
        self._data[self._front] = element
        self._size += 1

    def push_back(self, element: T) -> None:
        """Add an element at the back."""
        self._ensure_room()
        self._data[self._back] = element
        self._back = (self._back + 1) % len(self._data)
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the front element; raise IndexError if empty."""
        if not self._size:
            raise IndexError("pop from an empty Deque")
        element = self._data[self._front]
        self._data[self._front] = None
        self._front = (self._front + 1) % len(self._data)
        self._size -= 1
        return element

    def pop_back(self) -> T:
        """Remove and return the back element; raise IndexError if empty."""
        if not self._size:
            raise IndexError("pop from an empty Deque")
        self._back = (self._back - 1) % len(self._data)
        element = self._data[self._back]
        self._data[self._back] = None
        self._size -= 1
        return element

    def front(self) -> T:
        """Return the front element; raise IndexError if empty."""
        if not self._size:
            raise IndexError("front of an empty Deque")
        return self._data[self._front]

    def back(self) -> T:
        """Return the back element; raise IndexError if empty."""
        if not self._size:
            raise IndexError("back of an empty Deque")
        return self._data[(self._back - 1) % len(self._data)]

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._data[self._slot(index)]

    def __setitem__(self, index: int, element: T) -> None:
        self._check_index(index)
        self._data[self._slot(index)] = element

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for index in range(self._size):
            yield self._data[self._slot(index)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Deque({self.to_list()!r})"

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._data = [None] * len(self._data)
        self._front = 0
        self._back = 0
        self._size = 0

    def capacity(self) -> int:
        """Return the number of slots in the buffer."""
        return len(self._data)

    def reserve(self, capacity: int) -> None:
        """Grow the buffer to at least capacity slots."""
        if capacity > len(self._data):
            self._relocate(capacity)

    def shrink_to_fit(self) -> None:
        """Shrink the buffer to exactly the number of elements."""
        if self._size < len(self._data):
            self._relocate(self._size)

    def to_list(self) -> list[T]:
        """Return the elements, front to back, as a new list."""
        return list(self)

    def filter(self, predicate: Callable[[T], Any]) -> Deque[T]:
        """Return a new deque with the elements that satisfy the predicate."""
        return Deque((e for e in self if predicate(e)), capacity=self._size)

    def any(self, predicate: Callable[[T], Any]) -> bool:
        """Return True if some element satisfies the predicate."""
        return any(predicate(e) for e in self)

    def all(self, predicate: Callable[[T], Any]) -> bool:
        """Return True if every element satisfies the predicate."""
        return all(predicate(e) for e in self)

    def copy(self) -> Deque[T]:
        """Return an independent copy."""
        return Deque(self, capacity=self._size)

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        for index, element in enumerate(reversed(self.to_list())):
            self._data[self._slot(index)] = element

    def rotate_left(self, n: int) -> None:
        """Move the first n elements to the back, one at a time."""
        if self._size <= 1 or n == 0:
            return
        for _ in range(n % self._size):
            self.push_back(self.pop_front())

    def rotate_right(self, n: int) -> None:
        """Move the last n elements to the front, one at a time."""
        if self._size <= 1 or n == 0:
            return
        for _ in range(n % self._size):
            self.push_front(self.pop_back())

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at two indices; raise IndexError if out of range."""
        self._check_index(i)
        self._check_index(j)
        a, b = self._slot(i), self._slot(j)
        self._data[a], self._data[b] = self._data[b], self._data[a]

    def insert(self, index: int, element: T) -> None:
        """Insert an element at index, 0 to len inclusive; raise IndexError otherwise."""
        if index < 0 or index > self._size:
            raise IndexError("Deque index out of range")
        if index == 0:
            self.push_front(element)
            return
        if index == self._size:
            self.push_back(element)
            return
        self._ensure_room()
        for position in range(self._size, index, -1):
            self._data[self._slot(position)] = self._data[self._slot(position - 1)]
        self._data[self._slot(index)] = element
        self._back = (self._back + 1) % len(self._data)
        self._size += 1

    def remove(self, index: int) -> T:
        """Remove and return the element at index; raise IndexError if out of range."""
        self._check_index(index)
        if index == 0:
            return self.pop_front()
        if index == self._size - 1:
            return self.pop_back()
        element = self._data[self._slot(index)]
        for position in range(index, self._size - 1):
            self._data[self._slot(position)] = self._data[self._slot(position + 1)]
        self._back = (self._back - 1) % len(self._data)
        self._data[self._back] = None
        self._size -= 1
        return element