"""Hamming distance."""

from collections.abc import Sequence

from fuzzt._sequence import as_sequence, as_text
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature
from fuzzt.errors import LengthMismatchError


def generic_hamming(a: Sequence, b: Sequence) -> int:
    """Count positions where the elements of a and b differ.

    Raises:
        LengthMismatchError: If the sequences have different lengths.

    Example:
        >>> generic_hamming([1, 2, 4], [1, 2, 3])
        1
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    return sum(1 for x, y in zip(a, b) if x != y)


def hamming(a: str, b: str) -> int:
    """Hamming distance between two equal-length strings.

    Raises:
        LengthMismatchError: If the strings have different lengths.

    Example:
        >>> hamming("hamming", "hammers")
        3
    """
    return generic_hamming(as_text(a, "a"), as_text(b, "b"))


def hamming_similarity(a: str, b: str) -> float:
    """``1 - hamming(a, b) / len(a)``; 1.0 for two empty strings."""
    distance = hamming(a, b)
    if not a:
        return 1.0
    return 1.0 - distance / len(a)


class Hamming(BaseMetric):
    feature = Feature.HAMMING

    def compute_metric(self, a: str, b: str) -> int:
        return hamming(a, b)


__all__ = ["generic_hamming", "hamming", "hamming_similarity", "Hamming"]
