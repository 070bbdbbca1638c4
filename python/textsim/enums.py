"""Enums for textsim API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity algorithms.

    This enum provides type-safe algorithm selection for scoring and search
    operations. String values are accepted wherever an Algorithm is.

    Example:
        >>> from textsim import Algorithm, score
        >>> round(score("apple", "apples", Algorithm.DICE), 4)
        0.8889
    """

    DICE = "dice"
    """Bigram overlap (Sorensen-Dice coefficient), the default"""

    LEVENSHTEIN = "levenshtein"
    """Edit distance normalized to a similarity"""

    JACCARD = "jaccard"
    """Jaccard index over bigram sets"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro similarity with common-prefix boost"""


DEFAULT_ALGORITHM = Algorithm.DICE

__all__ = ["Algorithm", "DEFAULT_ALGORITHM"]
