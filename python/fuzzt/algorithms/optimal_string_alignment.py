"""Optimal String Alignment distance (restricted Damerau-Levenshtein).

Like Levenshtein, but an adjacent transposition counts as one edit. A
substring that took part in a transposition cannot be edited again, which is
why ``osa_distance("ca", "abc")`` is 3 while full Damerau-Levenshtein gives 2.
"""

from collections.abc import Sequence

from fuzzt._sequence import as_sequence, as_text
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature


def generic_osa_distance(a: Sequence, b: Sequence) -> int:
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    n, m = len(a), len(b)
    if n == 0:
        return m
    if m == 0:
        return n

    # rows i-2, i-1 and i of the cost table
    prev_two = list(range(m + 1))
    prev = list(range(m + 1))
    for i in range(1, n + 1):
        a_elem = a[i - 1]
        curr = [i] + [0] * m
        for j in range(1, m + 1):
            b_elem = b[j - 1]
            cost = 0 if a_elem == b_elem else 1
            curr[j] = min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost)
            if i > 1 and j > 1 and a_elem == b[j - 2] and a[i - 2] == b_elem:
                curr[j] = min(curr[j], prev_two[j - 2] + 1)
        prev_two, prev = prev, curr
    return prev[m]


def osa_distance(a: str, b: str) -> int:
    """OSA distance between two strings.

    Example:
        >>> osa_distance("ab", "bca")
        3
    """
    return generic_osa_distance(as_text(a, "a"), as_text(b, "b"))


def normalized_osa(a: str, b: str) -> float:
    """OSA similarity in [0, 1]; 1.0 for two empty strings."""
    a = as_text(a, "a")
    b = as_text(b, "b")
    if not a and not b:
        return 1.0
    return 1.0 - osa_distance(a, b) / max(len(a), len(b))


class OptimalStringAlignment(BaseMetric):
    feature = Feature.OPTIMAL_STRING_ALIGNMENT

    def compute_metric(self, a: str, b: str) -> int:
        return osa_distance(a, b)


class NormalizedOptimalStringAlignment(BaseMetric):
    feature = Feature.OPTIMAL_STRING_ALIGNMENT

    def compute_metric(self, a: str, b: str) -> float:
        return normalized_osa(a, b)


__all__ = [
    "generic_osa_distance",
    "osa_distance",
    "normalized_osa",
    "OptimalStringAlignment",
    "NormalizedOptimalStringAlignment",
]
