"""Fewest notes needed to make change: recursive, memoised and dynamic programming."""

from __future__ import annotations

from typing import Sequence


def num_coins_rec1(cashes: Sequence[int], amount: int) -> int:
    """Fewest notes for ``amount`` by plain recursion."""
    if amount in cashes:
        return 1
    min_cashes = amount
    for c in cashes:
        if c <= amount:
            min_cashes = min(min_cashes, 1 + num_coins_rec1(cashes, amount - c))
    return min_cashes


def num_coins_rec2(cashes: Sequence[int], amount: int) -> int:
    """Fewest notes for ``amount`` by recursion with remembered results."""
    memo: dict[int, int] = {}

    def _solve(rest: int) -> int:
        if rest in cashes:
            memo[rest] = 1
            return 1
        if memo.get(rest, 0) > 0:
            return memo[rest]
        best = rest
        for c in cashes:
            if c <= rest:
                count = 1 + _solve(rest - c)
                if count < best:
                    best = count
                    memo[rest] = best
        return best

    return _solve(amount)


def num_coins_dp_show(cashes: Sequence[int], amount: int) -> tuple[int, list[int]]:
    """Fewest notes for ``amount`` by dynamic programming.

    Returns the count and a table whose entry ``n`` is the last note used to
    make ``n``; pass that table to :func:`coins_used` to list the notes.
    """
    min_cashes = [0] * (amount + 1)
    cashes_used = [0] * (amount + 1)
    for denm in range(1, amount + 1):
        best = denm
        used = 1
        for c in cashes:
            if c <= denm:
                count = 1 + min_cashes[denm - c]
                if count < best:
                    best = count
                    used = c
        min_cashes[denm] = best
        cashes_used[denm] = used
    return min_cashes[amount], cashes_used


def num_coins_dp(cashes: Sequence[int], amount: int) -> int:
    """Fewest notes for ``amount`` by dynamic programming."""
    count, _ = num_coins_dp_show(cashes, amount)
    return count


def coins_used(cashes_used: Sequence[int], amount: int) -> list[int]:
    """List the notes that make ``amount``, following a table from num_coins_dp_show."""
    notes = []
    while amount > 0:
        curr = cashes_used[amount]
        notes.append(curr)
        amount -= curr
    return notes