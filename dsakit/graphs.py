"""Graph traversals and cycle detection on small integer-labelled graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Union

__all__ = ["DirectedGraph", "UndirectedGraph", "bfs_order", "dfs_order"]

Adjacency = Union[Mapping[int, Iterable[int]], Sequence[Iterable[int]]]


def _neighbours(adjacency: Adjacency, node: int) -> Iterable[int]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    return adjacency[node]


def bfs_order(adjacency: Adjacency, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in _neighbours(adjacency, node):
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return order


def dfs_order(adjacency: Adjacency, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first (preorder) order."""
    visited = {start}
    order = [start]
    stack: list[Iterator[int]] = [iter(_neighbours(adjacency, start))]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(_neighbours(adjacency, nxt)))
                break
        else:
            stack.pop()
    return order


class _Graph:
    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is outside 0..{self.vertex_count - 1}")


class DirectedGraph(_Graph):
    """A directed graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        super().__init__(vertex_count)

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def is_cyclic(self) -> bool:
        """Return True if some directed cycle exists, self-loops included."""
        visited = [False] * self.vertex_count
        on_path = [False] * self.vertex_count
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = on_path[root] = True
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                node, pending = stack[-1]
                for nxt in pending:
                    if not visited[nxt]:
                        visited[nxt] = on_path[nxt] = True
                        stack.append((nxt, iter(self._adjacency[nxt])))
                        break
                    if on_path[nxt]:
                        return True
                else:
                    on_path[node] = False
                    stack.pop()
        return False


class UndirectedGraph(_Graph):
    """An undirected graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        super().__init__(vertex_count)

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def is_cyclic(self) -> bool:
        """Return True if a visited non-parent neighbour is met during a DFS."""
        visited = [False] * self.vertex_count
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, -1, iter(self._adjacency[root]))]
            while stack:
                node, parent, pending = stack[-1]
                for nxt in pending:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, node, iter(self._adjacency[nxt])))
                        break
                    if nxt != parent:
                        return True
                else:
                    stack.pop()
        return False

    def bfs(self, start: int) -> list[int]:
        """Breadth-first order of the vertices reachable from ``start``."""
        self._check(start)
        return bfs_order(self._adjacency, start)

    def dfs(self, start: int) -> list[int]:
        """Depth-first order of the vertices reachable from ``start``."""
        self._check(start)
        return dfs_order(self._adjacency, start)