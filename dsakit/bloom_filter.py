"""A Bloom filter using double hashing over two seeded hash functions."""

from __future__ import annotations

import math
import secrets
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)

_MASK64 = (1 << 64) - 1


class BloomFilter(Generic[T]):
    """Probabilistic set sized for ``cap`` items at false-positive rate ``ert``.

    ``seeds`` fixes the two hash seeds; by default they are random.
    """

    def __init__(self, cap: int, ert: float, seeds: tuple[int, int] | None = None) -> None:
        if cap <= 0:
            raise ValueError("cap must be positive")
        if not 0.0 < ert < 1.0:
            raise ValueError("ert must be between 0 and 1")
        bits_count = -cap * math.log(ert) / (math.log(2) ** 2)
        self._bits = [False] * math.ceil(bits_count)
        self.hash_fn_count = math.ceil(-math.log2(ert))
        self._seeds = seeds if seeds is not None else (secrets.randbits(64), secrets.randbits(64))

    def __len__(self) -> int:
        return len(self._bits)

    def _hashes(self, elem: T) -> tuple[int, int]:
        s0, s1 = self._seeds
        return hash((s0, elem)) & _MASK64, hash((s1, elem)) & _MASK64

    def _indexes(self, elem: T):
        h1, h2 = self._hashes(elem)
        size = len(self._bits)
        for fn_i in range(self.hash_fn_count):
            yield ((h1 + fn_i * h2) & _MASK64) % size

    def insert(self, elem: T) -> None:
        """Record ``elem`` in the filter."""
        for index in self._indexes(elem):
            self._bits[index] = True

    def __contains__(self, elem: T) -> bool:
        return all(self._bits[index] for index in self._indexes(elem))