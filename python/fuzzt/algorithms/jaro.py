"""Jaro and Jaro-Winkler similarity.

Two elements match when they are equal and no further apart than
``max(len(a), len(b)) // 2 - 1`` positions. Jaro combines the match ratio
of both inputs with the share of matches that appear in the same order.
Jaro-Winkler adds a bonus for a common prefix of up to four elements, but
only once the Jaro score exceeds 0.7.
"""

from collections.abc import Sequence

from fuzzt._sequence import as_sequence, as_text, common_prefix_length
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature
from fuzzt.errors import ValidationError

BOOST_THRESHOLD = 0.7
MAX_PREFIX = 4
DEFAULT_PREFIX_WEIGHT = 0.1
MAX_PREFIX_WEIGHT = 0.25


def generic_jaro(a: Sequence, b: Sequence) -> float:
    """Jaro similarity of two sequences whose elements support ``==``.

    Example:
        >>> generic_jaro([1, 2], [3, 4])
        0.0
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    a_len, b_len = len(a), len(b)
    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    search_range = max(0, max(a_len, b_len) // 2 - 1)
    a_flags = [False] * a_len
    b_flags = [False] * b_len

    matches = 0
    for i, a_elem in enumerate(a):
        low = max(0, i - search_range)
        high = min(b_len, i + search_range + 1)
        for j in range(low, high):
            if not b_flags[j] and a_elem == b[j]:
                a_flags[i] = True
                b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    # walk both matched subsequences in order, counting disagreements
    half_transpositions = 0
    j = 0
    for i, a_elem in enumerate(a):
        if not a_flags[i]:
            continue
        while not b_flags[j]:
            j += 1
        if a_elem != b[j]:
            half_transpositions += 1
        j += 1
    transpositions = half_transpositions // 2

    return (
        matches / a_len
        + matches / b_len
        + (matches - transpositions) / matches
    ) / 3.0


def generic_jaro_winkler(
    a: Sequence, b: Sequence, prefix_weight: float = DEFAULT_PREFIX_WEIGHT
) -> float:
    """Jaro-Winkler similarity of two sequences.

    Args:
        a: First sequence.
        b: Second sequence.
        prefix_weight: Scaling factor for the common-prefix bonus, in
            [0.0, 0.25].

    Raises:
        ValidationError: If ``prefix_weight`` is out of range.
    """
    if not 0.0 <= prefix_weight <= MAX_PREFIX_WEIGHT:
        raise ValidationError(
            f"prefix_weight must be in range [0.0, {MAX_PREFIX_WEIGHT}], got {prefix_weight}"
        )
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    sim = generic_jaro(a, b)
    if sim <= BOOST_THRESHOLD:
        return sim
    prefix = common_prefix_length(a, b, MAX_PREFIX)
    return sim + prefix_weight * prefix * (1.0 - sim)


def jaro(a: str, b: str) -> float:
    """Jaro similarity between two strings.

    Example:
        >>> round(jaro("martha", "marhta"), 3)
        0.944
    """
    return generic_jaro(as_text(a, "a"), as_text(b, "b"))


def jaro_winkler(a: str, b: str, prefix_weight: float = DEFAULT_PREFIX_WEIGHT) -> float:
    """Jaro-Winkler similarity between two strings.

    Example:
        >>> round(jaro_winkler("martha", "marhta"), 3)
        0.961
    """
    return generic_jaro_winkler(as_text(a, "a"), as_text(b, "b"), prefix_weight)


class Jaro(BaseMetric):
    feature = Feature.JARO

    def compute_metric(self, a: str, b: str) -> float:
        return jaro(a, b)


class JaroWinkler(BaseMetric):
    """Jaro-Winkler metric object.

    Args:
        prefix_weight: Scaling factor for the prefix bonus (default 0.1).
    """

    feature = Feature.JARO

    def __init__(self, prefix_weight: float = DEFAULT_PREFIX_WEIGHT):
        if not 0.0 <= prefix_weight <= MAX_PREFIX_WEIGHT:
            raise ValidationError(
                f"prefix_weight must be in range [0.0, {MAX_PREFIX_WEIGHT}], got {prefix_weight}"
            )
        self.prefix_weight = prefix_weight

    def compute_metric(self, a: str, b: str) -> float:
        return jaro_winkler(a, b, self.prefix_weight)

    def __repr__(self) -> str:
        return f"JaroWinkler(prefix_weight={self.prefix_weight!r})"


__all__ = [
    "generic_jaro",
    "generic_jaro_winkler",
    "jaro",
    "jaro_winkler",
    "Jaro",
    "JaroWinkler",
]
