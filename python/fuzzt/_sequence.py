"""Sequence helpers shared by every metric.

Metrics operate on anything that supports ``len()``, integer indexing and
element ``==``. Strings are compared per code point.
"""

from collections.abc import Sequence
from typing import Any, Iterator, Tuple


def as_sequence(value: Any, name: str) -> Sequence:
    """Return ``value`` as an indexable sequence.

    Raises:
        TypeError: If ``value`` is None or not iterable.
    """
    if value is None:
        raise TypeError(f"{name} must be a sequence, got None")
    if isinstance(value, Sequence):
        return value
    try:
        return list(value)
    except TypeError:
        raise TypeError(
            f"{name} must be a sequence, got {type(value).__name__}"
        ) from None


def as_text(value: Any, name: str) -> str:
    """Validate that a string entry point received a ``str``."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def common_prefix_length(a: Sequence, b: Sequence, limit: int) -> int:
    length = 0
    for x, y in zip(a[:limit], b[:limit]):
        if x != y:
            break
        length += 1
    return length


def bigrams(seq: Sequence) -> Iterator[Tuple[Any, Any]]:
    """Yield every contiguous pair of elements."""
    return zip(seq, seq[1:])


def strip_whitespace(text: str) -> str:
    return "".join(ch for ch in text if not ch.isspace())


__all__ = ["as_sequence", "as_text", "common_prefix_length", "bigrams", "strip_whitespace"]
