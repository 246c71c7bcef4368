"""Ratcliff/Obershelp ("Gestalt") pattern matching.

The longest common contiguous block of the two inputs is located, then the
regions to its left and to its right are matched the same way. The score is
twice the total matched length over the combined length.
"""

from collections.abc import Sequence
from typing import Dict, Hashable, List, Tuple

from fuzzt._sequence import as_sequence, as_text
from fuzzt.algorithms.interface import BaseMetric
from fuzzt.enums import Feature


def _positions(b: Sequence) -> Dict[Hashable, List[int]]:
    index: Dict[Hashable, List[int]] = {}
    for j, elem in enumerate(b):
        index.setdefault(elem, []).append(j)
    return index


def _longest_block(
    a: Sequence,
    b_positions: Dict[Hashable, List[int]],
    a_lo: int,
    a_hi: int,
    b_lo: int,
    b_hi: int,
) -> Tuple[int, int, int]:
    """Longest common block of a[a_lo:a_hi] and b[b_lo:b_hi].

    Ties go to the block starting earliest in a, then earliest in b.
    Returns ``(i, j, size)``.
    """
    best_i, best_j, best_size = a_lo, b_lo, 0
    # run length of the block ending at (i - 1, j), keyed by j
    run_lengths: Dict[int, int] = {}
    for i in range(a_lo, a_hi):
        new_runs: Dict[int, int] = {}
        for j in b_positions.get(a[i], ()):
            if j < b_lo:
                continue
            if j >= b_hi:
                break
            size = run_lengths.get(j - 1, 0) + 1
            new_runs[j] = size
            if size > best_size:
                best_i, best_j, best_size = i - size + 1, j - size + 1, size
        run_lengths = new_runs
    return best_i, best_j, best_size


def matched_length(a: Sequence, b: Sequence) -> int:
    """Total length of the matching blocks found by Ratcliff/Obershelp."""
    b_positions = _positions(b)
    total = 0
    stack = [(0, len(a), 0, len(b))]
    while stack:
        a_lo, a_hi, b_lo, b_hi = stack.pop()
        i, j, size = _longest_block(a, b_positions, a_lo, a_hi, b_lo, b_hi)
        if size == 0:
            continue
        total += size
        if a_lo < i and b_lo < j:
            stack.append((a_lo, i, b_lo, j))
        if i + size < a_hi and j + size < b_hi:
            stack.append((i + size, a_hi, j + size, b_hi))
    return total


def generic_sequence_matcher(a: Sequence, b: Sequence) -> float:
    """Gestalt similarity of two sequences of hashable elements."""
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    length = len(a) + len(b)
    if length == 0:
        return 1.0
    return 2.0 * matched_length(a, b) / length


def sequence_matcher(a: str, b: str) -> float:
    """Gestalt similarity of two strings.

    The result depends on argument order: ``("tide", "diet")`` scores 0.25
    while ``("diet", "tide")`` scores 0.5.

    Example:
        >>> sequence_matcher("test", "tent")
        0.75
    """
    return generic_sequence_matcher(as_text(a, "a"), as_text(b, "b"))


class SequenceMatcher(BaseMetric):
    feature = Feature.GESTALT

    def compute_metric(self, a: str, b: str) -> float:
        return sequence_matcher(a, b)


__all__ = [
    "matched_length",
    "generic_sequence_matcher",
    "sequence_matcher",
    "SequenceMatcher",
]
