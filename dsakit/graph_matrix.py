"""A directed graph stored as an adjacency matrix of booleans."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VertexMatrix:
    """A vertex identified by its row/column index ``id`` in the matrix."""

    id: int
    name: str


class GraphMatrix:
    """Directed graph over ``nodes`` vertices numbered from 0."""

    def __init__(self, nodes: int) -> None:
        if nodes < 0:
            raise ValueError("nodes must not be negative")
        self._nodes = nodes
        self._graph = [[False] * nodes for _ in range(nodes)]

    def __len__(self) -> int:
        return self._nodes

    def __repr__(self) -> str:
        return f"GraphMatrix(nodes={self._nodes}, graph={self._graph!r})"

    def is_empty(self) -> bool:
        """Return True when the graph has no vertices."""
        return self._nodes == 0

    def _check(self, n1: VertexMatrix, n2: VertexMatrix) -> None:
        if not (0 <= n1.id < self._nodes and 0 <= n2.id < self._nodes):
            raise IndexError("vertex id out of range")

    def add_edge(self, n1: VertexMatrix, n2: VertexMatrix) -> None:
        """Add a directed edge from ``n1`` to ``n2``; raise IndexError if either is out of range."""
        self._check(n1, n2)
        self._graph[n1.id][n2.id] = True

    def has_edge(self, n1: VertexMatrix, n2: VertexMatrix) -> bool:
        """Return True when there is an edge from ``n1`` to ``n2``."""
        self._check(n1, n2)
        return self._graph[n1.id][n2.id]