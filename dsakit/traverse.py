"""Breadth-first and depth-first traversal of a small undirected graph."""

from __future__ import annotations

from collections import deque
from typing import Iterable

_MIN_VERTICES = 8


def create_graph(data: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build adjacency lists from (from, to) pairs over vertices numbered from 1.

    Entry ``i`` of the result lists the neighbours of vertex ``i`` in the
    order they appear in ``data``; entry 0 is unused.  Each vertex's list is
    printed as ``[i]->[a][b]...``.
    """
    pairs = [(int(a), int(b)) for a, b in data]
    last = max([_MIN_VERTICES, *(a for a, _ in pairs), *(b for _, b in pairs)])
    adjacency: list[list[int]] = [[] for _ in range(last + 1)]
    for a, b in pairs:
        if a < 1:
            raise ValueError("vertices are numbered from 1")
        adjacency[a].append(b)
    for i in range(1, last + 1):
        print(f"[{i}]->" + "".join(f"[{n}]" for n in adjacency[i]))
    return adjacency


def bfs(graph: list[list[int]]) -> list[int]:
    """Visit the graph breadth first from vertex 1; print and return the order."""
    visited = {1}
    order = [1]
    pending = deque(graph[1])
    while pending:
        data = pending.popleft()
        if data not in visited:
            visited.add(data)
            order.append(data)
            pending.extend(graph[data])
    print("".join(f"{v}->" for v in order))
    return order


def dfs(graph: list[list[int]]) -> list[int]:
    """Visit the graph depth first from vertex 1; print and return the order."""
    visited = {1}
    order = [1]
    pending = list(reversed(graph[1]))
    while pending:
        data = pending.pop()
        if data not in visited:
            visited.add(data)
            order.append(data)
            pending.extend(reversed(graph[data]))
    print("".join(f"{v}->" for v in order))
    return order