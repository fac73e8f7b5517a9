"""Jaro and Jaro-Winkler string similarity."""

from __future__ import annotations

_PREFIX_SCALE = 0.1
_MAX_PREFIX = 4


def jaro_distance(first: str, second: str) -> float:
    """Jaro similarity: 0 for nothing in common, 1 for identical strings."""
    if first == second:
        return 1.0
    if not first or not second:
        return 0.0

    window = max(max(len(first), len(second)) // 2 - 1, 0)
    first_matched = [False] * len(first)
    second_matched = [False] * len(second)

    matches = 0
    for i, char in enumerate(first):
        start = max(0, i - window)
        end = min(len(second), i + window + 1)
        for j in range(start, end):
            if not second_matched[j] and second[j] == char:
                first_matched[i] = second_matched[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    first_seq = [c for c, hit in zip(first, first_matched) if hit]
    second_seq = [c for c, hit in zip(second, second_matched) if hit]
    transpositions = sum(a != b for a, b in zip(first_seq, second_seq)) / 2

    return (
        matches / len(first)
        + matches / len(second)
        + (matches - transpositions) / matches
    ) / 3


def jaro_winkler_distance(first: str, second: str) -> float:
    """Jaro similarity boosted for a common prefix of up to four characters."""
    jaro = jaro_distance(first, second)
    prefix = 0
    for a, b in zip(first, second):
        if a != b or prefix == _MAX_PREFIX:
            break
        prefix += 1
    return jaro + _PREFIX_SCALE * prefix * (1.0 - jaro)