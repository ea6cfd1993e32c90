"""A prefix tree of strings, each word optionally carrying a value."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional


def edit_distance(word1: str, word2: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(word2) + 1))
    for i, char1 in enumerate(word1, start=1):
        current = [i]
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


@dataclass(slots=True)
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False
    value: Any = None


def _walk(node: _Node, prefix: str) -> Iterator[tuple[str, _Node]]:
    if node.is_end:
        yield prefix, node
    for char, child in node.children.items():
        yield from _walk(child, prefix + char)


class Trie:
    """A prefix tree holding a set of words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        self._size = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str, value: Any = None) -> None:
        """Add a word, storing value with it; re-inserting replaces the value."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        if not node.is_end:
            self._size += 1
        node.is_end = True
        node.value = value

    def _find(self, word: str) -> Optional[_Node]:
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Return True if the word is stored."""
        node = self._find(word)
        return node is not None and node.is_end

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def lookup(self, word: str) -> Any:
        """Return the value stored with a word; raise KeyError if absent."""
        node = self._find(word)
        if node is None or not node.is_end:
            raise KeyError(word)
        return node.value

    def starts_with(self, prefix: str) -> bool:
        """Return True if some stored word starts with the prefix."""
        return self._find(prefix) is not None

    def delete(self, word: str) -> None:
        """Remove a word and prune unused nodes; raise KeyError if absent."""
        path: list[tuple[_Node, str]] = []
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                raise KeyError(word)
            path.append((node, char))
            node = child
        if not node.is_end:
            raise KeyError(word)
        node.is_end = False
        node.value = None
        self._size -= 1
        for parent, char in reversed(path):
            child = parent.children[char]
            if child.is_end or child.children:
                break
            del parent.children[char]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for word, _ in _walk(self._root, ""):
            yield word

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return len(self) == len(other) and set(self) == set(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Trie({self.words()!r})"

    def clear(self) -> None:
        """Remove every word."""
        self._root = _Node()
        self._size = 0

    def words(self) -> list[str]:
        """Return every stored word."""
        return list(self)

    def words_with_prefix(self, prefix: str, limit: Optional[int] = None) -> list[str]:
        """Return the words starting with prefix, at most limit of them if given."""
        node = self._find(prefix)
        if node is None:
            return []
        found = (word for word, _ in _walk(node, prefix))
        if limit is None:
            return list(found)
        if limit <= 0:
            return []
        return list(islice(found, limit))

    def longest_common_prefix(self) -> str:
        """Return the longest prefix shared by every stored word."""
        if self._size == 0:
            return ""
        chars: list[str] = []
        node = self._root
        while len(node.children) == 1 and not node.is_end:
            char, node = next(iter(node.children.items()))
            chars.append(char)
        return "".join(chars)

    def words_by_length(self, length: int) -> list[str]:
        """Return the stored words with exactly length characters."""
        return [word for word in self if len(word) == length]

    def words_with_pattern(self, pattern: str) -> list[str]:
        """Return words matching pattern: '?' is any one character, '*' any run."""
        found: list[str] = []

        def match(node: _Node, prefix: str, index: int) -> None:
            if index == len(pattern):
                if node.is_end:
                    found.append(prefix)
                return
            char = pattern[index]
            if char == "?":
                for c, child in node.children.items():
                    match(child, prefix + c, index + 1)
            elif char == "*":
                match(node, prefix, index + 1)
                for c, child in node.children.items():
                    match(child, prefix + c, index)
            else:
                child = node.children.get(char)
                if child is not None:
                    match(child, prefix + char, index + 1)

        match(self._root, "", 0)
        return found

    def edit_distance(self, word1: str, word2: str) -> int:
        """Return the Levenshtein distance between two strings."""
        return edit_distance(word1, word2)

    def words_within_distance(self, target: str, max_distance: int) -> list[str]:
        """Return the stored words within max_distance edits of target."""
        return [word for word in self if edit_distance(word, target) <= max_distance]

    def height(self) -> int:
        """Return the number of nodes on the longest path, counting the root."""
        def depth(node: _Node) -> int:
            return 1 + max((depth(child) for child in node.children.values()), default=0)

        return depth(self._root)

    def filter(self, predicate: Callable[[str], Any]) -> Trie:
        """Return a new trie with the words, and values, satisfying the predicate."""
        result = Trie()
        for word, node in _walk(self._root, ""):
            if predicate(word):
                result.insert(word, node.value)
        return result

    def copy(self) -> Trie:
        """Return an independent copy holding the same words and values."""
        return self.filter(lambda _word: True)

    def words_with_suffix(self, suffix: str) -> list[str]:
        """Return the stored words ending with suffix."""
        return [word for word in self if word.endswith(suffix)]

    def words_containing(self, substring: str) -> list[str]:
        """Return the stored words containing substring."""
        return [word for word in self if substring in word]