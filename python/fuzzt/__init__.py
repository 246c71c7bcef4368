"""
fuzzt - String similarity metrics and top-N fuzzy matching

A Python library for comparing sequences with edit distances, alignment and
set-based similarities, and for ranking candidate strings against a query.
Useful for spell-checking, deduplication, record linkage and autocomplete.

Example usage:
    >>> import fuzzt

    # Edit distances
    >>> fuzzt.levenshtein("kitten", "sitting")
    3
    >>> fuzzt.damerau_levenshtein("ac", "cba")
    2

    # Similarities in [0, 1]
    >>> round(fuzzt.jaro_winkler("martha", "marhta"), 3)
    0.961

    # Works on any sequences, not only strings
    >>> fuzzt.generic_levenshtein([1, 2, 3], [0, 2, 5])
    2

    # Rank candidates
    >>> fuzzt.get_top_n(
    ...     "apple", ["apply", "apples", "ape", "applet", "applesauce"],
    ...     cutoff=0.8, limit=3,
    ... )
    ['apples', 'applet', 'apply']
"""

from importlib.metadata import version as _get_version

# Register the .fuzzt expression namespace
import fuzzt.expr  # noqa: F401
from fuzzt import batch, config, polars_ext
from fuzzt.algorithms import (
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
    NormalizedDamerauLevenshtein,
    NormalizedLevenshtein,
    NormalizedOptimalStringAlignment,
    OptimalStringAlignment,
    SequenceMatcher,
    SimilarityMetric,
    SorensenDice,
    available_metrics,
    damerau_levenshtein,
    generic_damerau_levenshtein,
    generic_hamming,
    generic_jaro,
    generic_jaro_winkler,
    generic_levenshtein,
    generic_osa_distance,
    generic_sequence_matcher,
    get_metric,
    hamming,
    hamming_similarity,
    jaro,
    jaro_winkler,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    normalized_osa,
    osa_distance,
    sequence_matcher,
    sorensen_dice,
)
from fuzzt.enums import Feature, Metric
from fuzzt.errors import AlgorithmError, FuzztError, LengthMismatchError, ValidationError
from fuzzt.matcher import MatchCandidate, extract, extract_one, get_top_n
from fuzzt.processors import (
    LowerAlphaNumStringProcessor,
    NullStringProcessor,
    StringProcessor,
)

__version__ = _get_version("fuzzt")
__all__ = [
    # Version
    "__version__",
    # Errors
    "FuzztError",
    "ValidationError",
    "AlgorithmError",
    "LengthMismatchError",
    # Enums
    "Feature",
    "Metric",
    # Distance/similarity functions
    "hamming",
    "hamming_similarity",
    "levenshtein",
    "normalized_levenshtein",
    "osa_distance",
    "normalized_osa",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "jaro",
    "jaro_winkler",
    "sorensen_dice",
    "sequence_matcher",
    # Generic sequence variants
    "generic_hamming",
    "generic_levenshtein",
    "generic_osa_distance",
    "generic_damerau_levenshtein",
    "generic_jaro",
    "generic_jaro_winkler",
    "generic_sequence_matcher",
    # Metric objects
    "SimilarityMetric",
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
    "get_metric",
    "available_metrics",
    # Processors
    "StringProcessor",
    "NullStringProcessor",
    "LowerAlphaNumStringProcessor",
    # Ranking
    "MatchCandidate",
    "extract",
    "extract_one",
    "get_top_n",
    # Submodules
    "batch",
    "config",
    "polars_ext",
]


# Convenience aliases
edit_distance = levenshtein
similarity = normalized_levenshtein
