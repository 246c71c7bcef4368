"""Damerau-Levenshtein distance with unrestricted adjacent transpositions.

Unlike OSA, a transposed pair may overlap earlier edits, so the result is a
true metric. The table carries a border row and column holding ``n + m`` so
that the transposition term never wins before a real match has been seen.
"""

from collections.abc import Sequence
from typing import Dict, Hashable

from fuzzt._sequence import as_sequence, as_text
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature


def generic_damerau_levenshtein(a: Sequence, b: Sequence) -> int:
    """Damerau-Levenshtein distance over sequences of hashable elements.

    Example:
        >>> generic_damerau_levenshtein([1, 2, 3, 4], [2, 1, 3, 4])
        1
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    n, m = len(a), len(b)
    if n == 0:
        return m
    if m == 0:
        return n

    max_distance = n + m
    # d[i + 1][j + 1] is the distance between a[:i] and b[:j]
    d = [[0] * (m + 2) for _ in range(n + 2)]
    d[0][0] = max_distance
    for i in range(n + 1):
        d[i + 1][0] = max_distance
        d[i + 1][1] = i
    for j in range(m + 1):
        d[0][j + 1] = max_distance
        d[1][j + 1] = j

    # last row (1-based) at which each element of a was seen
    last_row: Dict[Hashable, int] = {}

    for i in range(1, n + 1):
        a_elem = a[i - 1]
        # last column in this row where a[i - 1] matched
        last_match_col = 0
        for j in range(1, m + 1):
            b_elem = b[j - 1]
            k = last_row.get(b_elem, 0)
            l = last_match_col
            if a_elem == b_elem:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            d[i + 1][j + 1] = min(
                d[i][j] + cost,
                d[i + 1][j] + 1,
                d[i][j + 1] + 1,
                d[k][l] + (i - k - 1) + 1 + (j - l - 1),
            )
        last_row[a_elem] = i

    return d[n + 1][m + 1]


def damerau_levenshtein(a: str, b: str) -> int:
    """Damerau-Levenshtein distance between two strings.

    Example:
        >>> damerau_levenshtein("ca", "abc")
        2
    """
    return generic_damerau_levenshtein(as_text(a, "a"), as_text(b, "b"))


def normalized_damerau_levenshtein(a: str, b: str) -> float:
    """Damerau-Levenshtein similarity in [0, 1]; 1.0 for two empty strings.

    Example:
        >>> round(normalized_damerau_levenshtein("levenshtein", "löwenbräu"), 5)
        0.27273
    """
    a = as_text(a, "a")
    b = as_text(b, "b")
    if not a and not b:
        return 1.0
    return 1.0 - damerau_levenshtein(a, b) / max(len(a), len(b))


class DamerauLevenshtein(BaseMetric):
    feature = Feature.DAMERAU_LEVENSHTEIN

    def compute_metric(self, a: str, b: str) -> int:
        return damerau_levenshtein(a, b)


class NormalizedDamerauLevenshtein(BaseMetric):
    feature = Feature.DAMERAU_LEVENSHTEIN

    def compute_metric(self, a: str, b: str) -> float:
        return normalized_damerau_levenshtein(a, b)


__all__ = [
    "generic_damerau_levenshtein",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "DamerauLevenshtein",
    "NormalizedDamerauLevenshtein",
]
