"""Hamming and edit (Levenshtein) distances."""

from __future__ import annotations


def _check_non_negative(*values: int) -> None:
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")


def hamming_distance1(source: int, target: int) -> int:
    """Count differing bits by shifting through the XOR of the two values."""
    _check_non_negative(source, target)
    count = 0
    xor = source ^ target
    while xor:
        count += xor & 1
        xor >>= 1
    return count


def hamming_distance2(source: int, target: int) -> int:
    """Count differing bits with a population count."""
    _check_non_negative(source, target)
    return bin(source ^ target).count("1")


def hamming_distance_str(source: str, target: str) -> int:
    """Count positions at which two equal-length strings differ."""
    if len(source) != len(target):
        raise ValueError("Must have the same length...")
    return sum(cs != ct for cs, ct in zip(source, target))


def _empty_side_distance(source: str, target: str) -> int | None:
    # When one side is empty the other side's length is counted in UTF-8 bytes.
    if not source:
        return len(target.encode("utf-8"))
    if not target:
        return len(source.encode("utf-8"))
    return None


def edit_distance1(source: str, target: str) -> int:
    """Edit distance computed with a full matrix."""
    empty = _empty_side_distance(source, target)
    if empty is not None:
        return empty

    distance = [[0] * (len(target) + 1) for _ in range(len(source) + 1)]
    for i in range(1, len(source) + 1):
        distance[i][0] = i
    for j in range(1, len(target) + 1):
        distance[0][j] = j

    for i, cs in enumerate(source):
        for j, ct in enumerate(target):
            ins = distance[i + 1][j] + 1
            dele = distance[i][j + 1] + 1
            sub = distance[i][j] + (cs != ct)
            distance[i + 1][j + 1] = min(ins, dele, sub)

    return distance[-1][-1]


def edit_distance2(source: str, target: str) -> int:
    """Edit distance computed with a single rolling row."""
    empty = _empty_side_distance(source, target)
    if empty is not None:
        return empty

    distances = list(range(len(target) + 1))
    for i, cs in enumerate(source):
        substt = i
        distances[0] = i + 1
        for j, ct in enumerate(target):
            dist = min(min(distances[j], distances[j + 1]) + 1, substt + (cs != ct))
            substt = distances[j + 1]
            distances[j + 1] = dist

    return distances[-1]