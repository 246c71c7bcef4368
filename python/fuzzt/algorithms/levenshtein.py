"""Levenshtein edit distance."""

from collections.abc import Sequence

from fuzzt._sequence import as_sequence, as_text
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature


def generic_levenshtein(a: Sequence, b: Sequence) -> int:
    """Minimum number of insertions, deletions and substitutions to turn a into b.

    Works on any sequences whose elements support ``==``. Only two rows of
    the cost table are kept.

    Example:
        >>> generic_levenshtein([1, 2, 3], [1, 2, 3, 4, 5, 6])
        3
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    n, m = len(a), len(b)
    if n == 0:
        return m
    if m == 0:
        return n

    prev = list(range(m + 1))
    for i in range(1, n + 1):
        a_elem = a[i - 1]
        curr = [i] + [0] * m
        for j in range(1, m + 1):
            if a_elem == b[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = 1 + min(prev[j], curr[j - 1], prev[j - 1])
        prev = curr
    return prev[m]


def levenshtein(a: str, b: str) -> int:
    """Levenshtein distance between two strings, counted in code points.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    return generic_levenshtein(as_text(a, "a"), as_text(b, "b"))


def normalized_levenshtein(a: str, b: str) -> float:
    """Levenshtein similarity in [0, 1]; 1.0 for two empty strings.

    Example:
        >>> round(normalized_levenshtein("kitten", "sitting"), 5)
        0.57143
    """
    a = as_text(a, "a")
    b = as_text(b, "b")
    if not a and not b:
        return 1.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))


class Levenshtein(BaseMetric):
    feature = Feature.LEVENSHTEIN

    def compute_metric(self, a: str, b: str) -> int:
        return levenshtein(a, b)


class NormalizedLevenshtein(BaseMetric):
    feature = Feature.LEVENSHTEIN

    def compute_metric(self, a: str, b: str) -> float:
        return normalized_levenshtein(a, b)


__all__ = [
    "generic_levenshtein",
    "levenshtein",
    "normalized_levenshtein",
    "Levenshtein",
    "NormalizedLevenshtein",
]
