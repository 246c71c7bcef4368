"""Enums for fuzzt API."""

from enum import Enum


class Feature(str, Enum):
    """Metric families that can be switched on or off.

    Example:
        >>> from fuzzt import config, Feature
        >>> config.configure([Feature.LEVENSHTEIN, Feature.JARO])
    """

    HAMMING = "hamming"
    LEVENSHTEIN = "levenshtein"
    OPTIMAL_STRING_ALIGNMENT = "optimal_string_alignment"
    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    JARO = "jaro"
    SORENSEN_DICE = "sorensen_dice"
    GESTALT = "gestalt"


class Metric(str, Enum):
    """Metrics selectable by name in the ranking and batch APIs.

    String values are accepted anywhere a Metric is, case-insensitively.

    Example:
        >>> from fuzzt import Metric, get_top_n
        >>> get_top_n("brazil", ["braziu", "spain"], metric=Metric.JARO_WINKLER)
        ['braziu', 'spain']
    """

    HAMMING = "hamming"
    """Count of differing positions (equal-length inputs only)"""

    LEVENSHTEIN = "levenshtein"
    """Edit distance (insertions, deletions, substitutions)"""

    NORMALIZED_LEVENSHTEIN = "normalized_levenshtein"
    """Levenshtein rescaled to a similarity in [0, 1]"""

    OSA = "osa"
    """Optimal String Alignment (restricted Damerau-Levenshtein) distance"""

    NORMALIZED_OSA = "normalized_osa"
    """OSA rescaled to a similarity in [0, 1]"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including unrestricted transpositions"""

    NORMALIZED_DAMERAU_LEVENSHTEIN = "normalized_damerau_levenshtein"
    """Damerau-Levenshtein rescaled to a similarity in [0, 1]"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro similarity with common-prefix boost, good for names"""

    SORENSEN_DICE = "sorensen_dice"
    """Bigram Sørensen-Dice coefficient"""

    SEQUENCE_MATCHER = "sequence_matcher"
    """Ratcliff/Obershelp (Gestalt) matching-block ratio"""


__all__ = ["Feature", "Metric"]
