"""Batch operations API for fuzzt.

List-based helpers built on the ranking pipeline and the metric registry.

Example usage:
    >>> import fuzzt.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.2)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [0.8, 0.8]

    # Full similarity matrix
    >>> matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
    >>> # matrix[0] = similarities of "hello" with each choice
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fuzzt._sequence import as_text
from fuzzt._utils import normalize_metric
from fuzzt.errors import ValidationError
from fuzzt.matcher import MatchCandidate, extract

if TYPE_CHECKING:
    from fuzzt._utils import MetricLike

logger = logging.getLogger(__name__)

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


def similarity(
    strings: list[str],
    query: str,
    metric: MetricLike | None = None,
) -> list[MatchCandidate]:
    """Compute similarity of a query against all strings.

    Results are returned in the same order as the input strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        metric: Metric name, Metric enum, metric object or callable
            (default: normalized Levenshtein).

    Returns:
        List of MatchCandidate objects in input order. ``id`` is the
        original index in the input list.
    """
    scorer = normalize_metric(metric)
    query = as_text(query, "query")
    return [
        MatchCandidate(text=text, score=scorer(query, as_text(text, "string")), id=idx)
        for idx, text in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    metric: MetricLike | None = None,
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchCandidate]:
    """Find top N best matches for a query from a list of strings.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        metric: Metric to score with (default: normalized Levenshtein).
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum score to include in results (default: 0.0).

    Returns:
        List of MatchCandidate objects sorted by score descending.
    """
    return extract(query, strings, cutoff=min_similarity, limit=limit, metric=metric)


def pairwise(
    left: list[str],
    right: list[str],
    metric: MetricLike | None = None,
) -> list[float]:
    """Compute the score of each aligned pair ``(left[i], right[i])``.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["hello", "world"], ["hallo", "word"], metric="levenshtein")
        [1, 1]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    scorer = normalize_metric(metric)
    return [
        scorer(as_text(a, "left item"), as_text(b, "right item"))
        for a, b in zip(left, right)
    ]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    metric: MetricLike | None = None,
) -> list[list[float]]:
    """Compute the score of every query against every choice.

    Returns:
        2D list where ``result[i][j]`` is the score of ``queries[i]``
        against ``choices[j]``.

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    scorer = normalize_metric(metric)
    choices = [as_text(c, "choice") for c in choices]
    matrix = [[scorer(as_text(q, "query"), c) for c in choices] for q in queries]
    logger.debug("Computed %dx%d similarity matrix", len(queries), len(choices))
    return matrix
