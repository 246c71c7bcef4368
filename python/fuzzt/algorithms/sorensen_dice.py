"""Sørensen-Dice coefficient over bigrams.

See https://en.wikipedia.org/wiki/S%C3%B8rensen%E2%80%93Dice_coefficient
"""

from collections import Counter
from collections.abc import Sequence

from fuzzt._sequence import as_sequence, as_text, bigrams, strip_whitespace
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature


def bigram_dice(a: Sequence, b: Sequence) -> float:
    """Dice coefficient of the bigram multisets of two sequences.

    Equal inputs score 1.0 (including two empty ones); an input shorter
    than two elements otherwise scores 0.0.
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    if list(a) == list(b):
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    a_bigrams = Counter(bigrams(a))
    b_bigrams = Counter(bigrams(b))
    intersection = sum((a_bigrams & b_bigrams).values())
    return 2.0 * intersection / (len(a) - 1 + len(b) - 1)


def sorensen_dice(a: str, b: str) -> float:
    """Sørensen-Dice similarity of two strings, ignoring whitespace.

    Example:
        >>> sorensen_dice("feris", "ferris")
        0.8888888888888888
    """
    a = strip_whitespace(as_text(a, "a"))
    b = strip_whitespace(as_text(b, "b"))
    return bigram_dice(a, b)


class SorensenDice(BaseMetric):
    feature = Feature.SORENSEN_DICE

    def compute_metric(self, a: str, b: str) -> float:
        return sorensen_dice(a, b)


__all__ = ["bigram_dice", "sorensen_dice", "SorensenDice"]
