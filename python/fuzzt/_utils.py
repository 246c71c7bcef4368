"""Internal utilities for fuzzt."""

from typing import Callable, Optional, Union

from fuzzt.algorithms import SimilarityMetric, default_metric, get_metric
from fuzzt.algorithms.interface import Score
from fuzzt.enums import Metric
from fuzzt.processors import NullStringProcessor, StringProcessor

MetricLike = Union[str, Metric, SimilarityMetric, Callable[[str, str], Score]]
ProcessorLike = Union[StringProcessor, Callable[[str], str]]


def normalize_metric(metric: Optional[MetricLike]) -> Callable[[str, str], Score]:
    """Turn any accepted metric spelling into a scoring callable.

    Args:
        metric: None (default metric), a metric name or Metric enum, an
            object with ``compute_metric``, or a plain callable.

    Returns:
        A callable taking two strings and returning a score.

    Raises:
        AlgorithmError: If a metric name is unknown or disabled.
        TypeError: If ``metric`` is none of the accepted kinds.

    Example:
        >>> normalize_metric("levenshtein")("kitten", "sitting")
        3
    """
    if metric is None:
        return default_metric().compute_metric
    if isinstance(metric, (str, Metric)):
        return get_metric(metric).compute_metric
    if isinstance(metric, SimilarityMetric):
        return metric.compute_metric
    if callable(metric):
        return metric
    raise TypeError(
        f"metric must be a name, Metric enum, SimilarityMetric or callable, "
        f"got {type(metric).__name__}"
    )


def normalize_processor(processor: Optional[ProcessorLike]) -> Callable[[str], str]:
    """Turn an optional processor into a callable; None means identity."""
    if processor is None:
        return NullStringProcessor().process
    if isinstance(processor, StringProcessor):
        return processor.process
    if callable(processor):
        return processor
    raise TypeError(
        f"processor must be a StringProcessor or callable, got {type(processor).__name__}"
    )


__all__ = ["MetricLike", "ProcessorLike", "normalize_metric", "normalize_processor"]
