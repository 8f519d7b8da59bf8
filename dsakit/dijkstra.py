"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Hashable, Iterable, Mapping, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Vertex:
    """A named graph vertex."""

    name: str


def dijkstra(start: V, adj_list: Mapping[V, Iterable[tuple[V, int]]]) -> dict[V, int]:
    """Return the shortest distance from ``start`` to every reachable vertex.

    ``adj_list`` maps each vertex to (neighbour, non-negative cost) pairs.
    """
    distances: dict[V, int] = {start: 0}
    visited: set[V] = set()
    tie = count()
    to_visit: list[tuple[int, int, V]] = [(0, next(tie), start)]

    while to_visit:
        distance, _, vertex = heapq.heappop(to_visit)
        if vertex in visited:
            continue
        visited.add(vertex)
        for neighbor, cost in adj_list.get(vertex, ()):
            new_distance = distance + cost
            if neighbor not in distances or new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                heapq.heappush(to_visit, (new_distance, next(tie), neighbor))
    return distances