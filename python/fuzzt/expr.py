"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzt` namespace on Polars expressions, enabling
chainable fuzzy matching operations directly in Polars expression contexts.
Values are scored row by row with ``map_elements``.

Example:
    >>> import polars as pl
    >>> import fuzzt  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").fuzzt.is_similar("John", min_similarity=0.7)
    ... )
"""

from typing import List, Optional, Union

import polars as pl

from fuzzt._utils import MetricLike, ProcessorLike, normalize_metric
from fuzzt.algorithms import default_distance_metric
from fuzzt.matcher import extract_one


def _text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzt")
class FuzztExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Access via `.fuzzt` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: func(_text(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=return_dtype,
        )

    def similarity(
        self,
        other: Union[str, pl.Expr],
        metric: Optional[MetricLike] = None,
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            metric: Similarity metric to use (name, Metric enum, or callable;
                default: normalized Levenshtein or the first enabled fallback)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(score=pl.col("name").fuzzt.similarity("John"))
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzt.similarity(pl.col("name2"))
            ... )
        """
        scorer = normalize_metric(metric)
        return self._pairwise(other, lambda a, b: float(scorer(a, b)), pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        metric: Optional[MetricLike] = None,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Example:
            >>> df.filter(pl.col("name").fuzzt.is_similar("John", min_similarity=0.85))
        """
        return self.similarity(other, metric=metric) >= min_similarity

    def distance(
        self,
        other: Union[str, pl.Expr],
        metric: Optional[MetricLike] = None,
    ) -> pl.Expr:
        """
        Calculate an integer edit distance to another value/column.

        Without a metric, Levenshtein is used, or the first enabled of
        Damerau-Levenshtein, OSA and Hamming.
        Hamming raises LengthMismatchError when a pair differs in length.

        Example:
            >>> df.with_columns(dist=pl.col("name").fuzzt.distance("John"))
        """
        if metric is None:
            metric = default_distance_metric()
        scorer = normalize_metric(metric)
        return self._pairwise(other, lambda a, b: int(scorer(a, b)), pl.Int64)

    def best_match(
        self,
        choices: List[str],
        metric: Optional[MetricLike] = None,
        min_similarity: Optional[float] = None,
        processor: Optional[ProcessorLike] = None,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            metric: Metric to use (default: normalized Levenshtein)
            min_similarity: Minimum score to return a match (otherwise null)
            processor: Optional preprocessing applied before scoring

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzt.best_match(categories)
            ... )
        """
        scorer = normalize_metric(metric)

        def find_best(value):
            if value is None:
                return None
            best = extract_one(
                str(value), choices, cutoff=min_similarity, processor=processor, metric=scorer
            )
            return best.text if best is not None else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)


__all__ = ["FuzztExprNamespace"]
