"""A weighted directed graph stored as adjacency lists."""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class VertexAdjlist(Generic[T]):
    """A vertex with its outgoing edges as (neighbour key, weight) pairs."""

    def __init__(self, key: T) -> None:
        self.key = key
        self.connects: list[tuple[T, int]] = []

    def __repr__(self) -> str:
        return f"VertexAdjlist({self.key!r}, connects={self.connects!r})"

    def adjacent_key(self, key: T) -> bool:
        """Return True when there is an edge from this vertex to ``key``."""
        return any(nbr == key for nbr, _ in self.connects)

    def add_neighbor(self, nbr: T, wt: int) -> None:
        """Add an edge to ``nbr`` with weight ``wt``."""
        self.connects.append((nbr, wt))

    def neighbors(self) -> list[T]:
        """Return the keys of all neighbours, in insertion order."""
        return [nbr for nbr, _ in self.connects]

    def weight_to(self, key: T) -> int:
        """Return the weight of the first edge to ``key``, or 0 if there is none."""
        return next((wt for nbr, wt in self.connects if nbr == key), 0)


class GraphAdjlist(Generic[T]):
    """Directed weighted graph keyed by vertex key."""

    def __init__(self) -> None:
        self._vertnums = 0
        self._edgenums = 0
        self._vertices: dict[T, VertexAdjlist[T]] = {}

    def __repr__(self) -> str:
        return f"GraphAdjlist({list(self._vertices.values())!r})"

    def is_empty(self) -> bool:
        """Return True when no vertex has been added."""
        return self._vertnums == 0

    def vertex_num(self) -> int:
        """Return the vertex count."""
        return self._vertnums

    def edge_num(self) -> int:
        """Return the edge count."""
        return self._edgenums

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def add_vertex(self, key: T) -> VertexAdjlist[T] | None:
        """Add a fresh vertex for ``key``; return the vertex it replaced, if any."""
        self._vertnums += 1
        old = self._vertices.get(key)
        self._vertices[key] = VertexAdjlist(key)
        return old

    def get_vertex(self, key: T) -> VertexAdjlist[T] | None:
        """Return the vertex for ``key``, or None."""
        return self._vertices.get(key)

    def vertex_keys(self) -> list[T]:
        """Return the keys of all vertices."""
        return list(self._vertices)

    def remove_vertex(self, key: T) -> VertexAdjlist[T]:
        """Remove ``key`` with its outgoing and incoming edges and return it.

        Raises KeyError when there is no such vertex.
        """
        old = self._vertices.pop(key)
        self._vertnums -= 1
        self._edgenums -= len(old.connects)
        for vertex in self._vertices.values():
            if vertex.adjacent_key(key):
                vertex.connects = [(k, wt) for k, wt in vertex.connects if k != key]
                self._edgenums -= 1
        return old

    def add_edge(self, from_key: T, to_key: T, wt: int) -> None:
        """Add an edge, creating either end vertex if it is missing."""
        if from_key not in self._vertices:
            self.add_vertex(from_key)
        if to_key not in self._vertices:
            self.add_vertex(to_key)
        self._edgenums += 1
        self._vertices[from_key].add_neighbor(to_key, wt)

    def is_adjacent(self, from_key: T, to_key: T) -> bool:
        """Return True when there is an edge from ``from_key`` to ``to_key``.

        Raises KeyError when ``from_key`` is not a vertex.
        """
        return self._vertices[from_key].adjacent_key(to_key)