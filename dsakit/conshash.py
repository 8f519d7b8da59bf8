"""Consistent hashing ring with virtual replicas per node."""

from __future__ import annotations

import hashlib
from bisect import bisect_left, insort
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

DEFAULT_REPLICAS = 10


def hash_conshash(val: object) -> int:
    """Return a stable 64-bit hash of ``val``'s string form (bytes are used as is)."""
    data = val if isinstance(val, bytes) else str(val).encode("utf-8")
    return int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "big")


@dataclass(frozen=True)
class Node:
    """A server on the ring; its string form is ``ip:port``."""

    host: str
    ip: str
    port: int

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


class Ring(Generic[T]):
    """Hash ring placing each node at ``replicas`` points."""

    def __init__(self, replicas: int = DEFAULT_REPLICAS) -> None:
        self.replicas = replicas
        self._keys: list[int] = []
        self._ring: dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def _points(self, node: T) -> Iterable[int]:
        return (hash_conshash(f"{node}{i}") for i in range(self.replicas))

    def add(self, node: T) -> None:
        """Place ``node`` at its replica points."""
        for key in self._points(node):
            if key not in self._ring:
                insort(self._keys, key)
            self._ring[key] = node

    def add_multi(self, nodes: Iterable[T]) -> None:
        """Add every node in ``nodes``."""
        for node in nodes:
            self.add(node)

    def remove(self, node: T) -> None:
        """Take ``node``'s replica points off the ring; raise ValueError if the ring is empty."""
        if not self._ring:
            raise ValueError("ring is empty")
        for key in self._points(node):
            if self._ring.pop(key, None) is not None:
                del self._keys[bisect_left(self._keys, key)]

    def remove_multi(self, nodes: Iterable[T]) -> None:
        """Remove every node in ``nodes``."""
        for node in nodes:
            self.remove(node)

    def get(self, key: int) -> T | None:
        """Return the node at the first point not below ``key``, wrapping to the start."""
        if not self._keys:
            return None
        pos = bisect_left(self._keys, key)
        if pos == len(self._keys):
            pos = 0
        return self._ring[self._keys[pos]]