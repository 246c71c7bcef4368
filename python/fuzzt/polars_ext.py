"""High-level Polars DataFrame operations for fuzzt.

Functions in This Module
------------------------
- ``match_series()``: Match query Series against target Series
- ``top_n_series()``: Rank the best choices for every query in a Series

Example Usage
-------------
>>> import polars as pl
>>> from fuzzt.polars_ext import top_n_series
>>>
>>> queries = pl.Series(["appel", "banan"])
>>> top_n_series(queries, ["apple", "banana", "cherry"], limit=1)

See Also
--------
- ``fuzzt.expr``: Polars expression namespace for column operations
- ``fuzzt.matcher``: The ranking pipeline these helpers are built on
"""

import logging
from typing import List, Optional, Sequence, Union

import polars as pl

from fuzzt._utils import MetricLike, ProcessorLike, normalize_metric
from fuzzt.matcher import extract

logger = logging.getLogger(__name__)

MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "score": pl.Float64,
}

TOP_N_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "rank": pl.Int64,
    "match": pl.Utf8,
    "match_idx": pl.Int64,
    "score": pl.Float64,
}


def _choice_list(choices: Union["pl.Series", Sequence[str]]) -> List[str]:
    if isinstance(choices, pl.Series):
        choices = choices.to_list()
    return [str(x) if x is not None else "" for x in choices]


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    metric: Optional[MetricLike] = None,
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, keeps every target scoring at least ``min_similarity``.
    Null queries and null targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        metric: Metric to use (name, Metric enum, metric object, callable;
            default: normalized Levenshtein or the first enabled fallback)
        min_similarity: Minimum similarity threshold

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, min_similarity=0.7)
    """
    scorer = normalize_metric(metric)
    targets = target_series.to_list()

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        for target_idx, target in enumerate(targets):
            if target is None:
                continue
            score = float(scorer(str(query), str(target)))
            if score >= min_similarity:
                rows.append(
                    {
                        "query_idx": query_idx,
                        "query": str(query),
                        "target_idx": target_idx,
                        "target": str(target),
                        "score": score,
                    }
                )

    return pl.DataFrame(rows, schema=MATCH_SCHEMA)


def top_n_series(
    queries: "pl.Series",
    choices: Union["pl.Series", Sequence[str]],
    limit: Optional[int] = 3,
    cutoff: Optional[float] = None,
    metric: Optional[MetricLike] = None,
    processor: Optional[ProcessorLike] = None,
) -> "pl.DataFrame":
    """
    Rank the best choices for every query.

    Runs :func:`fuzzt.extract` once per non-null query. Null choices are
    compared as empty strings.

    Args:
        queries: Series of query strings
        choices: Series or list of candidate strings
        limit: Maximum matches per query (None for all)
        cutoff: Minimum score to keep a match
        metric: Metric to use (default: normalized Levenshtein)
        processor: Optional preprocessing applied to queries and choices

    Returns:
        DataFrame with columns: query_idx, query, rank, match, match_idx,
        score. ``rank`` starts at 1 for the best match of each query.
    """
    scorer = normalize_metric(metric)
    choice_list = _choice_list(choices)

    rows = []
    for query_idx, query in enumerate(queries.to_list()):
        if query is None:
            continue
        matches = extract(
            str(query),
            choice_list,
            cutoff=cutoff,
            limit=limit,
            processor=processor,
            metric=scorer,
        )
        for rank, match in enumerate(matches, start=1):
            rows.append(
                {
                    "query_idx": query_idx,
                    "query": str(query),
                    "rank": rank,
                    "match": match.text,
                    "match_idx": match.id,
                    "score": float(match.score),
                }
            )

    logger.debug("top_n_series produced %d rows for %d queries", len(rows), len(queries))
    return pl.DataFrame(rows, schema=TOP_N_SCHEMA)


__all__ = ["match_series", "top_n_series"]
