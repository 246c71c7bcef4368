"""Top-N ranking of candidate strings against a query.

The pipeline is a linear scan: every choice is run through the processor,
scored against the processed query, filtered by ``cutoff``, sorted by score
descending and truncated to ``limit``. Candidates with equal scores keep
their original relative order.

Example:
    >>> from fuzzt import get_top_n
    >>> get_top_n(
    ...     "apple",
    ...     ["apply", "apples", "ape", "applet", "applesauce"],
    ...     cutoff=0.8,
    ...     limit=3,
    ... )
    ['apples', 'applet', 'apply']
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from fuzzt._sequence import as_text
from fuzzt._utils import MetricLike, ProcessorLike, normalize_metric, normalize_processor
from fuzzt.algorithms.interface import Score
from fuzzt.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CUTOFF = 0.0


@dataclass(frozen=True)
class MatchCandidate:
    """One scored choice.

    Attributes:
        text: The original, unprocessed choice.
        score: The metric value computed on the processed strings.
        id: Position of the choice in the input collection.
    """

    text: str
    score: Score
    id: int


def _validate(
    cutoff: Optional[float], limit: Optional[int], workers: Optional[int] = None
) -> None:
    if cutoff is not None and (
        isinstance(cutoff, bool)
        or not isinstance(cutoff, (int, float))
        or not math.isfinite(cutoff)
    ):
        raise ValidationError(f"cutoff must be a finite number, got {cutoff!r}")
    if limit is not None and (
        isinstance(limit, bool) or not isinstance(limit, int) or limit < 0
    ):
        raise ValidationError(f"limit must be a non-negative integer, got {limit!r}")
    if workers is not None and (
        isinstance(workers, bool) or not isinstance(workers, int) or workers < 1
    ):
        raise ValidationError(f"workers must be a positive integer, got {workers!r}")


def _score_all(
    query: str,
    choices: Sequence[str],
    process: Callable[[str], str],
    scorer: Callable[[str, str], Score],
    workers: Optional[int],
) -> List[Score]:
    def score(choice: str) -> Score:
        return scorer(query, process(as_text(choice, "choice")))

    if workers is not None and workers > 1 and len(choices) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order
            return list(executor.map(score, choices))
    return [score(choice) for choice in choices]


def extract(
    query: str,
    choices: Sequence[str],
    cutoff: Optional[float] = None,
    limit: Optional[int] = None,
    processor: Optional[ProcessorLike] = None,
    metric: Optional[MetricLike] = None,
    workers: Optional[int] = None,
) -> List[MatchCandidate]:
    """Score every choice against the query and return the ranked survivors.

    Args:
        query: The string to match.
        choices: Candidate strings.
        cutoff: Minimum score to keep a candidate (default: 0.0).
        limit: Maximum number of results (default: no limit).
        processor: Applied to the query and to every choice before scoring
            (default: identity). A StringProcessor or a ``str -> str`` callable.
        metric: Scoring metric (default: normalized Levenshtein, or the first
            enabled fallback). A metric name, Metric enum, SimilarityMetric
            object or ``(str, str) -> number`` callable.
        workers: Score candidates on this many threads when greater than 1.

    Returns:
        MatchCandidate objects sorted by score descending. Equal scores
        keep the order of ``choices``.

    Raises:
        ValidationError: If ``cutoff``, ``limit`` or ``workers`` is invalid.
        AlgorithmError: If the metric name is unknown or disabled.
        TypeError: If the query or a choice is not a string.

    Example:
        >>> [(m.text, round(m.score, 3)) for m in extract("brazil", ["braziu", "spain"])]
        [('braziu', 0.833), ('spain', 0.333)]
    """
    _validate(cutoff, limit, workers)
    if cutoff is None:
        cutoff = DEFAULT_CUTOFF
    process = normalize_processor(processor)
    scorer = normalize_metric(metric)
    if choices is None:
        raise TypeError("choices must be a sequence of strings, got None")
    choices = list(choices)

    processed_query = process(as_text(query, "query"))
    scores = _score_all(processed_query, choices, process, scorer, workers)

    candidates = [
        MatchCandidate(text=choice, score=score, id=idx)
        for idx, (choice, score) in enumerate(zip(choices, scores))
        if score >= cutoff
    ]
    # list.sort is stable, also with reverse=True
    candidates.sort(key=lambda c: c.score, reverse=True)
    if limit is not None:
        candidates = candidates[:limit]

    logger.debug(
        "Scored %d choices for %r: %d kept after cutoff=%s, limit=%s",
        len(choices),
        query,
        len(candidates),
        cutoff,
        limit,
    )
    return candidates


def get_top_n(
    query: str,
    choices: Sequence[str],
    cutoff: Optional[float] = None,
    limit: Optional[int] = None,
    processor: Optional[ProcessorLike] = None,
    metric: Optional[MetricLike] = None,
    workers: Optional[int] = None,
) -> List[str]:
    """Return the best-matching original choices, best first.

    Same arguments as :func:`extract`; only the choice strings are returned.

    Example:
        >>> get_top_n("brazil", ["trazil", "BRA ZIL", "brazil", "spain", "braziu"],
        ...           cutoff=0.7, limit=3)
        ['brazil', 'trazil', 'braziu']
    """
    return [
        candidate.text
        for candidate in extract(
            query,
            choices,
            cutoff=cutoff,
            limit=limit,
            processor=processor,
            metric=metric,
            workers=workers,
        )
    ]


def extract_one(
    query: str,
    choices: Sequence[str],
    cutoff: Optional[float] = None,
    processor: Optional[ProcessorLike] = None,
    metric: Optional[MetricLike] = None,
) -> Optional[MatchCandidate]:
    """Best candidate, or None when nothing reaches ``cutoff``."""
    matches = extract(query, choices, cutoff=cutoff, limit=1, processor=processor, metric=metric)
    return matches[0] if matches else None


__all__ = ["MatchCandidate", "extract", "extract_one", "get_top_n"]
