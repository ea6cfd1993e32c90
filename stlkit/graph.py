"""A directed or undirected graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """A graph of hashable nodes; each node keeps an ordered list of neighbours."""

    __slots__ = ("_adj", "directed")

    def __init__(self, directed: bool = False, edges: Iterable[tuple[T, T]] = ()) -> None:
        self.directed = directed
        self._adj: dict[T, list[T]] = {}
        for source, target in edges:
            self.add_edge(source, target)

    def add_node(self, node: T) -> None:
        """Add a node with no edges; an existing node is left as it is."""
        self._adj.setdefault(node, [])

    def add_edge(self, source: T, target: T) -> None:
        """Add an edge, adding its end nodes if needed; undirected edges go both ways."""
        self.add_node(source)
        self.add_node(target)
        self._adj[source].append(target)
        if not self.directed:
            self._adj[target].append(source)

    def remove_node(self, node: T) -> None:
        """Remove a node and the edges that lead to it; a missing node is ignored."""
        for source in list(self._adj):
            self.remove_edge(source, node)
        self._adj.pop(node, None)

    def remove_edge(self, source: T, target: T) -> None:
        """Remove one edge between two nodes; a missing edge is ignored."""
        neighbors = self._adj.get(source)
        if neighbors is not None and target in neighbors:
            neighbors.remove(target)
        if not self.directed:
            neighbors = self._adj.get(target)
            if neighbors is not None and source in neighbors:
                neighbors.remove(source)

    def has_node(self, node: T) -> bool:
        """Return True if the node is in the graph."""
        return node in self._adj

    def has_edge(self, source: T, target: T) -> bool:
        """Return True if there is an edge from source to target."""
        return target in self._adj.get(source, ())

    def neighbors(self, node: T) -> list[T]:
        """Return a copy of the neighbours of a node; empty if the node is absent."""
        return list(self._adj.get(node, ()))

    def nodes(self) -> list[T]:
        """Return every node, in the order they were added."""
        return list(self._adj)

    def _iter_edges(self) -> Iterator[tuple[T, T]]:
        seen: set[tuple[T, T]] = set()
        for source, neighbors in self._adj.items():
            for target in neighbors:
                if (source, target) in seen:
                    continue
                if not self.directed and (target, source) in seen:
                    continue
                seen.add((source, target))
                if not self.directed:
                    seen.add((target, source))
                yield source, target

    def edges(self) -> list[tuple[T, T]]:
        """Return every distinct edge once; an undirected edge appears in one direction."""
        return list(self._iter_edges())

    def node_count(self) -> int:
        """Return the number of nodes."""
        return len(self._adj)

    def edge_count(self) -> int:
        """Return the number of edges."""
        total = sum(len(neighbors) for neighbors in self._adj.values())
        return total if self.directed else total // 2

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self.directed != other.directed or len(self._adj) != len(other._adj):
            return False
        for node, neighbors in self._adj.items():
            other_neighbors = other._adj.get(node)
            if other_neighbors is None or len(neighbors) != len(other_neighbors):
                return False
            if set(neighbors) != set(other_neighbors):
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self.directed}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )

    def clear(self) -> None:
        """Remove every node and edge."""
        self._adj.clear()

    def degree(self, node: T) -> int:
        """Return the number of neighbour entries of a node; 0 if absent."""
        return len(self._adj.get(node, ()))

    def in_degree(self, node: T) -> int:
        """Return the number of edges into a node; the degree for undirected graphs."""
        if not self.directed:
            return self.degree(node)
        return sum(neighbors.count(node) for neighbors in self._adj.values())

    def out_degree(self, node: T) -> int:
        """Return the number of edges out of a node."""
        return self.degree(node)

    def bfs(self, start: T) -> list[T]:
        """Return the nodes reached from start in breadth-first order."""
        order: list[T] = []
        visited = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._adj.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def _dfs_from(self, start: T, visited: set[T]) -> list[T]:
        order = [start]
        visited.add(start)
        stack = [iter(self.neighbors(start))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self.neighbors(neighbor)))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, start: T) -> list[T]:
        """Return the nodes reached from start in depth-first (preorder) order."""
        return self._dfs_from(start, set())

    def dfs_iterative(self, start: T) -> list[T]:
        """Return the nodes reached from start using an explicit stack."""
        order: list[T] = []
        visited: set[T] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            stack.extend(n for n in reversed(self.neighbors(node)) if n not in visited)
        return order

    def connected_components(self) -> list[list[T]]:
        """Return the groups of nodes found by depth-first search from each unvisited node."""
        visited: set[T] = set()
        return [self._dfs_from(node, visited) for node in self._adj if node not in visited]

    def is_connected(self) -> bool:
        """Return True if the graph is empty or forms a single component."""
        return not self._adj or len(self.connected_components()) == 1

    def shortest_path(self, start: T, end: T) -> list[T]:
        """Return a path with the fewest edges from start to end.

        Raises KeyError if either node is absent and ValueError if end cannot
        be reached.
        """
        for node in (start, end):
            if node not in self._adj:
                raise KeyError(node)
        parent: dict[T, T] = {}
        visited = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            if node == end:
                path = [end]
                while path[-1] != start:
                    path.append(parent[path[-1]])
                path.reverse()
                return path
            for neighbor in self._adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    parent[neighbor] = node
                    queue.append(neighbor)
        raise ValueError(f"no path from {start!r} to {end!r}")

    def all_paths(self, start: T, end: T) -> list[list[T]]:
        """Return every simple path from start to end."""
        paths: list[list[T]] = []
        visited: set[T] = set()

        def extend(current: T, path: list[T]) -> None:
            if current == end:
                paths.append(list(path))
                return
            visited.add(current)
            for neighbor in self.neighbors(current):
                if neighbor not in visited:
                    path.append(neighbor)
                    extend(neighbor, path)
                    path.pop()
            visited.discard(current)

        extend(start, [start])
        return paths

    def has_cycle(self) -> bool:
        """Return True if a depth-first search meets a node still on its path."""
        on_path, done = 1, 2
        state: dict[T, int] = {}
        for root in self._adj:
            if root in state:
                continue
            state[root] = on_path
            stack = [(root, iter(self.neighbors(root)))]
            while stack:
                node, pending = stack[-1]
                for neighbor in pending:
                    seen = state.get(neighbor)
                    if seen is None:
                        state[neighbor] = on_path
                        stack.append((neighbor, iter(self.neighbors(neighbor))))
                        break
                    if seen == on_path:
                        return True
                else:
                    state[node] = done
                    stack.pop()
        return False

    def topological_sort(self) -> list[T]:
        """Return the nodes so every edge points forward.

        Raises ValueError for undirected graphs and graphs with a cycle.
        """
        if not self.directed:
            raise ValueError("topological sort needs a directed graph")
        if self.has_cycle():
            raise ValueError("graph has a cycle")
        finished: list[T] = []
        visited: set[T] = set()
        for root in self._adj:
            if root in visited:
                continue
            visited.add(root)
            stack = [(root, iter(self.neighbors(root)))]
            while stack:
                node, pending = stack[-1]
                for neighbor in pending:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append((neighbor, iter(self.neighbors(neighbor))))
                        break
                else:
                    finished.append(node)
                    stack.pop()
        finished.reverse()
        return finished

    def is_bipartite(self) -> bool:
        """Return True if the nodes can be coloured with two colours along every edge."""
        color: dict[T, int] = {}
        for root in self._adj:
            if root in color:
                continue
            color[root] = 1
            queue = deque([root])
            while queue:
                node = queue.popleft()
                for neighbor in self._adj.get(node, ()):
                    if neighbor not in color:
                        color[neighbor] = -color[node]
                        queue.append(neighbor)
                    elif color[neighbor] == color[node]:
                        return False
        return True

    def copy(self) -> Graph[T]:
        """Return an independent copy."""
        result: Graph[T] = Graph(self.directed)
        result._adj = {node: list(neighbors) for node, neighbors in self._adj.items()}
        return result

    def filter_nodes(self, predicate: Callable[[T], Any]) -> Graph[T]:
        """Return a graph of the nodes satisfying the predicate and the edges between them."""
        result: Graph[T] = Graph(self.directed)
        for node in self._adj:
            if predicate(node):
                result.add_node(node)
        for source, neighbors in self._adj.items():
            if result.has_node(source):
                for target in neighbors:
                    if result.has_node(target):
                        result.add_edge(source, target)
        return result

    def subgraph(self, nodes: Iterable[T]) -> Graph[T]:
        """Return the graph induced by the given nodes."""
        keep = set(nodes)
        return self.filter_nodes(lambda node: node in keep)

    def complement(self) -> Graph[T]:
        """Return a graph with an edge wherever this graph has none, without loops."""
        result: Graph[T] = Graph(self.directed)
        for node in self._adj:
            result.add_node(node)
        for source in self._adj:
            for target in self._adj:
                if source != target and not self.has_edge(source, target):
                    result.add_edge(source, target)
        return result

    def _check_same_kind(self, other: Graph[T]) -> None:
        if self.directed != other.directed:
            raise ValueError("cannot combine a directed and an undirected graph")

    def union(self, other: Graph[T]) -> Graph[T]:
        """Return a graph with the nodes and edges of both graphs."""
        self._check_same_kind(other)
        result = self.copy()
        for source, neighbors in other._adj.items():
            result.add_node(source)
            for target in neighbors:
                result.add_edge(source, target)
        return result

    def intersection(self, other: Graph[T]) -> Graph[T]:
        """Return a graph with the nodes and edges this graph shares with other."""
        self._check_same_kind(other)
        result: Graph[T] = Graph(self.directed)
        for source, neighbors in self._adj.items():
            if not other.has_node(source):
                continue
            result.add_node(source)
            for target in neighbors:
                if other.has_edge(source, target):
                    result.add_edge(source, target)
        return result

    def prim_mst(self, start: T) -> list[tuple[T, T]]:
        """Return the edges of a breadth-first spanning tree rooted at start."""
        tree: list[tuple[T, T]] = []
        visited = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbor in self._adj.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    tree.append((node, neighbor))
                    queue.append(neighbor)
        return tree

    def filter(self, predicate: Callable[[T, int], Any]) -> list[T]:
        """Return the nodes for which predicate(node, degree) holds."""
        return [node for node in self._adj if predicate(node, self.degree(node))]