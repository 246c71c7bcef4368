"""Metric implementations and the name-based metric registry.

Every metric belongs to a :class:`~fuzzt.enums.Feature` family. The registry
only hands out metrics whose family is enabled in :mod:`fuzzt.config`.
"""

from typing import Dict, Tuple, Type, Union

from fuzzt import config
from fuzzt.algorithms.damerau_levenshtein import (
    DamerauLevenshtein,
    NormalizedDamerauLevenshtein,
    damerau_levenshtein,
    generic_damerau_levenshtein,
    normalized_damerau_levenshtein,
)
from fuzzt.algorithms.gestalt import (
    SequenceMatcher,
    generic_sequence_matcher,
    sequence_matcher,
)
from fuzzt.algorithms.hamming import Hamming, generic_hamming, hamming, hamming_similarity
from fuzzt.algorithms.interface import BaseMetric, Score, SimilarityMetric
from fuzzt.algorithms.jaro import (
    Jaro,
    JaroWinkler,
    generic_jaro,
    generic_jaro_winkler,
    jaro,
    jaro_winkler,
)
from fuzzt.algorithms.levenshtein import (
    Levenshtein,
    NormalizedLevenshtein,
    generic_levenshtein,
    levenshtein,
    normalized_levenshtein,
)
from fuzzt.algorithms.optimal_string_alignment import (
    NormalizedOptimalStringAlignment,
    OptimalStringAlignment,
    generic_osa_distance,
    normalized_osa,
    osa_distance,
)
from fuzzt.algorithms.sorensen_dice import SorensenDice, sorensen_dice
from fuzzt.enums import Metric
from fuzzt.errors import AlgorithmError

METRIC_CLASSES: Dict[Metric, Type[BaseMetric]] = {
    Metric.HAMMING: Hamming,
    Metric.LEVENSHTEIN: Levenshtein,
    Metric.NORMALIZED_LEVENSHTEIN: NormalizedLevenshtein,
    Metric.OSA: OptimalStringAlignment,
    Metric.NORMALIZED_OSA: NormalizedOptimalStringAlignment,
    Metric.DAMERAU_LEVENSHTEIN: DamerauLevenshtein,
    Metric.NORMALIZED_DAMERAU_LEVENSHTEIN: NormalizedDamerauLevenshtein,
    Metric.JARO: Jaro,
    Metric.JARO_WINKLER: JaroWinkler,
    Metric.SORENSEN_DICE: SorensenDice,
    Metric.SEQUENCE_MATCHER: SequenceMatcher,
}

# Aliases accepted by name lookup in addition to the enum values
METRIC_ALIASES: Dict[str, Metric] = {
    "damerau": Metric.DAMERAU_LEVENSHTEIN,
    "optimal_string_alignment": Metric.OSA,
    "dice": Metric.SORENSEN_DICE,
    "gestalt": Metric.SEQUENCE_MATCHER,
    "ratcliff_obershelp": Metric.SEQUENCE_MATCHER,
}

# Similarity metrics tried in order when the caller does not pick one
DEFAULT_METRIC_CHAIN: Tuple[Metric, ...] = (
    Metric.NORMALIZED_LEVENSHTEIN,
    Metric.NORMALIZED_DAMERAU_LEVENSHTEIN,
    Metric.NORMALIZED_OSA,
    Metric.JARO_WINKLER,
    Metric.SORENSEN_DICE,
    Metric.SEQUENCE_MATCHER,
)

# Integer distances tried in order for distance helpers
DEFAULT_DISTANCE_CHAIN: Tuple[Metric, ...] = (
    Metric.LEVENSHTEIN,
    Metric.DAMERAU_LEVENSHTEIN,
    Metric.OSA,
    Metric.HAMMING,
)


def _parse_metric(name: Union[str, Metric]) -> Metric:
    if isinstance(name, Metric):
        return name
    if not isinstance(name, str):
        raise TypeError(f"metric must be str or Metric enum, got {type(name).__name__}")
    key = name.strip().lower()
    if key in METRIC_ALIASES:
        return METRIC_ALIASES[key]
    try:
        return Metric(key)
    except ValueError:
        valid = sorted({m.value for m in Metric} | set(METRIC_ALIASES))
        raise AlgorithmError(f"Unknown metric: '{name}'. Valid options: {valid}") from None


def get_metric(name: Union[str, Metric]) -> BaseMetric:
    """Return a metric object by name.

    Raises:
        AlgorithmError: If the name is unknown or its feature is disabled.
        TypeError: If ``name`` is neither a string nor a Metric.

    Example:
        >>> get_metric("jaro_winkler")
        JaroWinkler(prefix_weight=0.1)
    """
    metric = _parse_metric(name)
    cls = METRIC_CLASSES[metric]
    if not config.is_enabled(cls.feature):
        raise AlgorithmError(
            f"Metric '{metric.value}' is unavailable: feature '{cls.feature.value}' is disabled"
        )
    return cls()


def available_metrics() -> Tuple[Metric, ...]:
    """Metrics whose feature family is currently enabled."""
    return tuple(m for m, cls in METRIC_CLASSES.items() if config.is_enabled(cls.feature))


def default_metric() -> BaseMetric:
    """First enabled metric of :data:`DEFAULT_METRIC_CHAIN`.

    Raises:
        AlgorithmError: If every similarity family is disabled.
    """
    for metric in DEFAULT_METRIC_CHAIN:
        if config.is_enabled(METRIC_CLASSES[metric].feature):
            return METRIC_CLASSES[metric]()
    raise AlgorithmError("No similarity metric is enabled; enable at least one feature")


def default_distance_metric() -> BaseMetric:
    """First enabled metric of :data:`DEFAULT_DISTANCE_CHAIN`.

    Raises:
        AlgorithmError: If every distance family is disabled.
    """
    for metric in DEFAULT_DISTANCE_CHAIN:
        if config.is_enabled(METRIC_CLASSES[metric].feature):
            return METRIC_CLASSES[metric]()
    raise AlgorithmError("No distance metric is enabled; enable at least one feature")


__all__ = [
    "Score",
    "SimilarityMetric",
    "BaseMetric",
    "METRIC_CLASSES",
    "METRIC_ALIASES",
    "DEFAULT_METRIC_CHAIN",
    "get_metric",
    "available_metrics",
    "default_metric",
    "DEFAULT_DISTANCE_CHAIN",
    "default_distance_metric",
    # metric objects
    "Hamming",
    "Levenshtein",
    "NormalizedLevenshtein",
    "OptimalStringAlignment",
    "NormalizedOptimalStringAlignment",
    "DamerauLevenshtein",
    "NormalizedDamerauLevenshtein",
    "Jaro",
    "JaroWinkler",
    "SorensenDice",
    "SequenceMatcher",
    # functions
    "hamming",
    "hamming_similarity",
    "generic_hamming",
    "levenshtein",
    "normalized_levenshtein",
    "generic_levenshtein",
    "osa_distance",
    "normalized_osa",
    "generic_osa_distance",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "generic_damerau_levenshtein",
    "jaro",
    "jaro_winkler",
    "generic_jaro",
    "generic_jaro_winkler",
    "sorensen_dice",
    "sequence_matcher",
    "generic_sequence_matcher",
]
