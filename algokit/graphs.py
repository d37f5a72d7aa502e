"""Breadth-first search on adjacency lists and Kruskal's spanning tree."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Graph", "Edge", "kruskal", "spanning_tree_report"]


class Graph:
    """Undirected graph on vertices 0 .. vertices-1."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacent)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacent[vertex])

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"no vertex {vertex}")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacent[src].insert(0, dest)
        self._adjacent[dest].insert(0, src)

    def bfs(self, start: int) -> list[int]:
        """Vertices in the order breadth-first search visits them from ``start``."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacent[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


@dataclass(frozen=True)
class Edge:
    """Weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    w: int


def kruskal(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning forest of a cost adjacency matrix; zero means no edge."""
    rows = [list(row) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("cost matrix must be square")
    edges = [
        Edge(i, j, rows[i][j]) for i in range(1, n) for j in range(i) if rows[i][j] != 0
    ]
    edges.sort(key=lambda edge: edge.w)
    component = list(range(n))
    tree: list[Edge] = []
    for edge in edges:
        first, second = component[edge.u], component[edge.v]
        if first != second:
            tree.append(edge)
            component = [first if label == second else label for label in component]
    return tree


def spanning_tree_report(edges: Iterable[Edge]) -> str:
    """Edge lines named by letters, followed by the total cost."""
    names = string.ascii_uppercase
    lines = []
    cost = 0
    for edge in edges:
        if max(edge.u, edge.v) >= len(names):
            raise ValueError("too many vertices to name by letter")
        lines.append(f"\n{names[edge.u]} - {names[edge.v]} : {edge.w}")
        cost += edge.w
    lines.append(f"\nSpanning tree cost: {cost}")
    return "".join(lines)