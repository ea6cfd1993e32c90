"""An unbalanced binary search tree ordered by a "less than" function."""

from __future__ import annotations

import operator
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


def _walk_in_order(node: Optional[_Node[T]]) -> Iterator[_Node[T]]:
    stack: list[_Node[T]] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _subtree_size(node: Optional[_Node[T]]) -> int:
    return sum(1 for _ in _walk_in_order(node))


def _leftmost(node: _Node[T]) -> _Node[T]:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node[T]) -> _Node[T]:
    while node.right is not None:
        node = node.right
    return node


class BST(Generic[T]):
    """A binary search tree without duplicates; equal elements are ignored."""

    def __init__(
        self,
        less: Optional[Callable[[T, T], bool]] = None,
        items: Iterable[T] = (),
    ) -> None:
        self.less: Callable[[T, T], bool] = less if less is not None else operator.lt
        self._root: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def insert(self, value: T) -> None:
        """Insert a value unless an equivalent one is already stored."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if self.less(value, node.value):
                if node.left is None:
                    node.left = _Node(value)
                    self._size += 1
                    return
                node = node.left
            elif self.less(node.value, value):
                if node.right is None:
                    node.right = _Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def _find(self, value: T) -> Optional[_Node[T]]:
        node = self._root
        while node is not None and node.value != value:
            node = node.left if self.less(value, node.value) else node.right
        return node

    def search(self, value: T) -> bool:
        """Return True if the value is stored in the tree."""
        return self._find(value) is not None

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]

    def delete(self, value: T) -> None:
        """Remove a value; raise KeyError if it is not stored."""
        if not self.search(value):
            raise KeyError(value)
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if self.less(value, node.value):
                parent, node = node, node.left
            elif self.less(node.value, value):
                parent, node = node, node.right
            else:
                break
        self._size -= 1
        if node is None:
            return
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
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

    def min(self) -> T:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("min() of an empty BST")
        return _leftmost(self._root).value

    def max(self) -> T:
        """Return the largest value; raise ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("max() of an empty BST")
        return _rightmost(self._root).value

    def floor(self, value: T) -> T:
        """Return the largest stored value not greater than value."""
        best: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            if self.less(value, node.value):
                node = node.left
            else:
                best, node = node, node.right
        if best is None:
            raise KeyError(value)
        return best.value

    def ceiling(self, value: T) -> T:
        """Return the smallest stored value not less than value."""
        best: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            if self.less(node.value, value):
                node = node.right
            else:
                best, node = node, node.left
        if best is None:
            raise KeyError(value)
        return best.value

    def rank(self, value: T) -> int:
        """Return the number of stored values less than value."""
        result = 0
        node = self._root
        while node is not None:
            if self.less(value, node.value):
                node = node.left
            elif self.less(node.value, value):
                result += 1 + _subtree_size(node.left)
                node = node.right
            else:
                result += _subtree_size(node.left)
                break
        return result

    def select(self, rank: int) -> T:
        """Return the value with the given rank; raise IndexError if out of range."""
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
                return node.value
        raise IndexError("rank out of range")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in _walk_in_order(self._root):
            yield node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BST):
            return NotImplemented
        return len(self) == len(other) and self.in_order() == other.in_order()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BST({self.in_order()!r})"

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._size = 0

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

    def is_balanced(self) -> bool:
        """Return True if no node's subtree heights differ by more than one."""
        heights: dict[int, int] = {}
        for node in self._post_order_nodes():
            left = heights.get(id(node.left), 0) if node.left else 0
            right = heights.get(id(node.right), 0) if node.right else 0
            if abs(left - right) > 1:
                return False
            heights[id(node)] = 1 + max(left, right)
        return True

    def _post_order_nodes(self) -> Iterator[_Node[T]]:
        if self._root is None:
            return
        stack: list[tuple[_Node[T], bool]] = [(self._root, False)]
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

    def in_order(self) -> list[T]:
        """Return the values in sorted order."""
        return list(self)

    def pre_order(self) -> list[T]:
        """Return the values in pre-order."""
        result: list[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> list[T]:
        """Return the values in post-order."""
        return [node.value for node in self._post_order_nodes()]

    def level_order(self) -> list[T]:
        """Return the values breadth-first, level by level."""
        result: list[T] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def filter(self, predicate: Callable[[T], Any]) -> BST[T]:
        """Return a new tree with the values that satisfy the predicate."""
        return BST(self.less, (v for v in self if predicate(v)))

    def copy(self) -> BST[T]:
        """Return a new tree holding the same values."""
        return BST(self.less, self)

    def range(self, low: T, high: T) -> list[T]:
        """Return the values between low and high, both inclusive, in order."""
        return [
            v for v in self if not self.less(v, low) and not self.less(high, v)
        ]

    def successor(self, value: T) -> T:
        """Return the smallest value greater than value; raise KeyError if none."""
        best: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if self.less(node.value, value):
                node = node.right
            elif self.less(value, node.value):
                best, node = node, node.left
            else:
                if node.right is not None:
                    return _leftmost(node.right).value
                break
        if best is None:
            raise KeyError(value)
        return best.value

    def predecessor(self, value: T) -> T:
        """Return the largest value less than value; raise KeyError if none."""
        best: Optional[_Node[T]] = None
        node = self._root
        while node is not None:
            if self.less(value, node.value):
                node = node.left
            elif self.less(node.value, value):
                best, node = node, node.right
            else:
                if node.left is not None:
                    return _rightmost(node.left).value
                break
        if best is None:
            raise KeyError(value)
        return best.value