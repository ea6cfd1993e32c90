"""An ordered map kept in an unbalanced binary search tree."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    Mapping,
    Optional,
    TypeVar,
)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(slots=True)
class _Node(Generic[K, V]):
    key: K
    value: V
    left: Optional[_Node[K, V]] = None
    right: Optional[_Node[K, V]] = None


def _walk_in_order(node: Optional[_Node[K, V]]) -> Iterator[_Node[K, V]]:
    stack: list[_Node[K, V]] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _subtree_size(node: Optional[_Node[K, V]]) -> int:
    return sum(1 for _ in _walk_in_order(node))


def _leftmost(node: _Node[K, V]) -> _Node[K, V]:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node[K, V]) -> _Node[K, V]:
    while node.right is not None:
        node = node.right
    return node


class TreeMap(Generic[K, V]):
    """A map whose keys are kept sorted by a "less than" function."""

    def __init__(
        self,
        less: Optional[Callable[[K, K], bool]] = None,
        mapping: Optional[Mapping[K, V]] = None,
    ) -> None:
        self.less: Callable[[K, K], bool] = less if less is not None else operator.lt
        self._root: Optional[_Node[K, V]] = None
        self._size = 0
        if mapping is not None:
            for key, value in mapping.items():
                self.put(key, value)

    def put(self, key: K, value: V) -> None:
        """Store value under key, replacing any value already there."""
        if self._root is None:
            self._root = _Node(key, value)
            self._size += 1
            return
        node = self._root
        while True:
            if self.less(key, node.key):
                if node.left is None:
                    node.left = _Node(key, value)
                    self._size += 1
                    return
                node = node.left
            elif self.less(node.key, key):
                if node.right is None:
                    node.right = _Node(key, value)
                    self._size += 1
                    return
                node = node.right
            else:
                node.value = value
                return

    def _find(self, key: K) -> Optional[_Node[K, V]]:
        node = self._root
        while node is not None:
            if self.less(key, node.key):
                node = node.left
            elif self.less(node.key, key):
                node = node.right
            else:
                return node
        return None

    def get(self, key: K) -> V:
        """Return the value stored under key; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def remove(self, key: K) -> None:
        """Remove key and its value; raise KeyError if absent."""
        parent: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            if self.less(key, node.key):
                parent, node = node, node.left
            elif self.less(node.key, key):
                parent, node = node, node.right
            else:
                break
        if node is None:
            raise KeyError(key)
        self._size -= 1
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
            node.value = succ.value
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None  # type: ignore[arg-type]

    def contains_value(self, value: V) -> bool:
        """Return True if some key holds value."""
        return any(node.value == value for node in _walk_in_order(self._root))

    def min(self) -> tuple[K, V]:
        """Return the pair with the smallest key; raise ValueError if empty."""
        if self._root is None:
            raise ValueError("min() of an empty TreeMap")
        node = _leftmost(self._root)
        return node.key, node.value

    def max(self) -> tuple[K, V]:
        """Return the pair with the largest key; raise ValueError if empty."""
        if self._root is None:
            raise ValueError("max() of an empty TreeMap")
        node = _rightmost(self._root)
        return node.key, node.value

    @staticmethod
    def _pair(best: Optional[_Node[K, V]], key: K) -> tuple[K, V]:
        if best is None:
            raise KeyError(key)
        return best.key, best.value

    def floor(self, key: K) -> tuple[K, V]:
        """Return the pair with the largest key not greater than key."""
        best: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            if node.key == key:
                return node.key, node.value
            if self.less(key, node.key):
                node = node.left
            else:
                best, node = node, node.right
        return self._pair(best, key)

    def ceiling(self, key: K) -> tuple[K, V]:
        """Return the pair with the smallest key not less than key."""
        best: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            if node.key == key:
                return node.key, node.value
            if self.less(node.key, key):
                node = node.right
            else:
                best, node = node, node.left
        return self._pair(best, key)

    def lower(self, key: K) -> tuple[K, V]:
        """Return the pair with the largest key strictly less than key."""
        best: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            if self.less(node.key, key):
                best, node = node, node.right
            else:
                node = node.left
        return self._pair(best, key)

    def higher(self, key: K) -> tuple[K, V]:
        """Return the pair with the smallest key strictly greater than key."""
        best: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            if self.less(key, node.key):
                best, node = node, node.left
            else:
                node = node.right
        return self._pair(best, key)

    def rank(self, key: K) -> int:
        """Return the number of stored keys less than key."""
        result = 0
        node = self._root
        while node is not None:
            if self.less(key, node.key):
                node = node.left
            elif self.less(node.key, key):
                result += 1 + _subtree_size(node.left)
                node = node.right
            else:
                result += _subtree_size(node.left)
                break
        return result

    def select(self, rank: int) -> tuple[K, V]:
        """Return the pair whose key has the given rank; raise IndexError if out of range."""
        if rank < 0 or rank >= self._size:
            raise IndexError("rank out of range")
        node = self._root
        while node is not None:
            left_size = _subtree_size(node.left)
            if rank < left_size:
                node = node.left
            elif rank > left_size:
                rank -= left_size + 1
                node = node.right
            else:
                return node.key, node.value
        raise IndexError("rank out of range")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        for node in _walk_in_order(self._root):
            yield node.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeMap):
            return NotImplemented
        return len(self) == len(other) and self.entries() == other.entries()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TreeMap({self.to_dict()!r})"

    def clear(self) -> None:
        """Remove every key and value."""
        self._root = None
        self._size = 0

    def keys(self) -> list[K]:
        """Return the keys in sorted order."""
        return list(self)

    def values(self) -> list[V]:
        """Return the values in key order."""
        return [node.value for node in _walk_in_order(self._root)]

    def entries(self) -> list[tuple[K, V]]:
        """Return the key-value pairs in key order."""
        return [(node.key, node.value) for node in _walk_in_order(self._root)]

    def to_dict(self) -> dict[K, V]:
        """Return the pairs as a plain dict, in key order."""
        return dict(self.entries())

    def filter(self, predicate: Callable[[K, V], Any]) -> TreeMap[K, V]:
        """Return a new map with the pairs that satisfy the predicate."""
        result: TreeMap[K, V] = TreeMap(self.less)
        for key, value in self.entries():
            if predicate(key, value):
                result.put(key, value)
        return result

    def copy(self) -> TreeMap[K, V]:
        """Return an independent copy with the same ordering function."""
        return self.filter(lambda _key, _value: True)

    def range(self, low: K, high: K) -> list[tuple[K, V]]:
        """Return the pairs with keys between low and high, both inclusive."""
        return [
            (key, value)
            for key, value in self.entries()
            if not self.less(key, low) and not self.less(high, key)
        ]

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path; -1 when empty."""
        if self._root is None:
            return -1
        levels = -1
        level = [self._root]
        while level:
            levels += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return levels

    def _post_order_nodes(self) -> Iterator[_Node[K, V]]:
        if self._root is None:
            return
        stack: list[tuple[_Node[K, V], bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def is_balanced(self) -> bool:
        """Return True if no node's subtree heights differ by more than one."""
        heights: dict[int, int] = {}
        for node in self._post_order_nodes():
            left = heights[id(node.left)] if node.left is not None else 0
            right = heights[id(node.right)] if node.right is not None else 0
            if abs(left - right) > 1:
                return False
            heights[id(node)] = 1 + max(left, right)
        return True