# stlkit

Container data structures for Python, each with a small, predictable API.
Pure Python, no dependencies beyond the standard library, Python 3.10 or newer.

| Module              | Class(es) / functions      | What it is                                          |
|---------------------|----------------------------|-----------------------------------------------------|
| `stlkit.hashset`    | `HashSet`                  | Unordered set of unique elements                    |
| `stlkit.multiset`   | `MultiSet`                 | Bag that counts how often each element occurs       |
| `stlkit.multimap`   | `MultiMap`, `Entry`        | Map with a list of values per key                   |
| `stlkit.stack`      | `Stack`                    | LIFO stack                                          |
| `stlkit.queues`     | `Queue`, `PriorityQueue`   | FIFO queue and binary-heap priority queue           |
| `stlkit.ringdeque`  | `Deque`                    | Double-ended queue on a growable ring buffer        |
| `stlkit.bst`        | `BST`                      | Unbalanced binary search tree with order statistics |
| `stlkit.treemap`    | `TreeMap`                  | Ordered map on an unbalanced binary search tree     |
| `stlkit.trie`       | `Trie`, `edit_distance`    | Prefix tree with pattern and fuzzy lookup           |
| `stlkit.graph`      | `Graph`                    | Directed or undirected graph on adjacency lists     |

It is a library only: there is no command-line program and nothing is stored
on disk.

## Installation

```
pip install stlkit
```

## Examples

### Sets and multisets

```python
from stlkit.hashset import HashSet
from stlkit.multiset import MultiSet

a = HashSet([1, 2, 3, 4])
b = HashSet([3, 4, 5, 6])
a.union(b).to_list()                  # [1, 2, 3, 4, 5, 6]
a.intersection(b).to_list()           # [3, 4]
a.symmetric_difference(b)             # elements 1, 2, 5, 6
a.filter(lambda x: x % 2 == 0)        # elements 2, 4

words = MultiSet("the quick brown fox jumps over the lazy dog the fox".split())
words.count("the")                    # 3
words.most_common(2)                  # ['the', 'fox']
words.remove("the")                   # one occurrence
words.remove_all("fox")               # every occurrence
```

### Multimap

```python
from stlkit.multimap import MultiMap

mm = MultiMap()
mm.put("fruit", 1)
mm.put("fruit", 2)
mm.put("vegetable", 3)
mm.get("fruit")             # [1, 2]
mm.get_last("fruit")        # 2
mm.remove("fruit", 1)       # the key goes away once its last value is removed
mm.entries()                # [Entry(key='fruit', value=2), Entry(key='vegetable', value=3)]
```

### Stacks, queues and deques

```python
from stlkit.stack import Stack
from stlkit.queues import Queue, PriorityQueue
from stlkit.ringdeque import Deque

s = Stack([1, 2, 3])
s.pop()                     # 3
s.take(1)                   # [2]

q = Queue(["first", "second"])
q.dequeue()                 # 'first'
q.peek_back()               # 'second'

pq = PriorityQueue(lambda a, b: a < b, [5, 2, 8, 1])
pq.dequeue()                # 1

d = Deque([1, 2, 3])
d.push_front(0)
d.rotate_left(1)
d.to_list()                 # [1, 2, 3, 0]
```

`PriorityQueue` and the trees take a "less than" function; when it is left
out, `<` is used.

### Ordered trees

```python
from stlkit.bst import BST
from stlkit.treemap import TreeMap

tree = BST(lambda a, b: a < b, [5, 3, 7, 1, 9, 4])
tree.in_order()             # [1, 3, 4, 5, 7, 9]
tree.floor(6)               # 5
tree.range(3, 7)            # [3, 4, 5, 7]
tree.select(0)              # 1

tm = TreeMap(lambda a, b: a < b, {"apple": 1, "banana": 2, "cherry": 3})
tm.lower("cherry")          # ('banana', 2)
tm.rank("cherry")           # 2
tm.entries()                # [('apple', 1), ('banana', 2), ('cherry', 3)]
```

Neither tree rebalances itself; `height()` and `is_balanced()` report its
current shape.

### Trie

```python
from stlkit.trie import Trie, edit_distance

t = Trie(["hello", "help", "hero", "cat", "car"])
t.words_with_prefix("he")
t.words_with_prefix("he", limit=2)
t.words_with_pattern("h?llo")         # ['hello']
t.words_within_distance("helo", 1)
t.insert("apple", value={"kind": "fruit"})
t.lookup("apple")                     # {'kind': 'fruit'}
edit_distance("cat", "cats")          # 1
```

`?` in a pattern matches any single character, `*` any run of characters.

### Graph

```python
from stlkit.graph import Graph

g = Graph(directed=True, edges=[(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)])
g.bfs(1)                    # [1, 2, 3, 4, 5]
g.shortest_path(1, 5)       # [1, 2, 4, 5]
g.topological_sort()
g.has_cycle()               # False
```

## Errors

Lookups that find nothing raise instead of returning a flag:

- `pop`, `dequeue`, `peek`, `front`, `back` on an empty container, and
  out-of-range indices, raise `IndexError`; so does `select` with a bad rank.
- `min()` and `max()` on an empty `BST` or `TreeMap` raise `ValueError`.
- `floor`, `ceiling`, `lower`, `higher`, `successor`, `predecessor` with no
  answer, and removing or looking up a missing key or word
  (`BST.delete`, `TreeMap.get`/`remove`, `Trie.delete`/`lookup`,
  `MultiSet.remove`/`remove_all`, `MultiMap.get_first`/`get_last`/`remove`/`remove_all`)
  raise `KeyError`.
- `Stack`/`Queue` `index_of`, `last_index_of` and `remove` of a missing item
  raise `ValueError`.
- `Graph.shortest_path` raises `KeyError` for an unknown node and `ValueError`
  when the end cannot be reached; `topological_sort` raises `ValueError` for an
  undirected or cyclic graph; `union` and `intersection` raise `ValueError` when
  one graph is directed and the other is not.

`HashSet.remove`, `Graph.remove_node` and `Graph.remove_edge` quietly ignore
what is not there, and `MultiMap.get` returns an empty list for a missing key.

## Running the tests

```
pip install -e ".[test]"
pytest
```