"""
textsim - String similarity and fuzzy matching

A pure-Python library for scoring how alike two strings are, checking a
fixed collection for near matches, and fuzzy searching free text.

Example usage:
    >>> import textsim as ts

    # Simple similarity (bigram overlap by default)
    >>> round(ts.score("apple", "apples"), 4)
    0.8889
    >>> round(ts.score("hello", "hallo", ts.Algorithm.JARO_WINKLER), 2)
    0.88

    # Near-match checks against a fixed collection
    >>> index = ts.SimilarityIndex(["apple", "banana", "grape"])
    >>> index.contains_similar("apples", threshold=0.8)
    True

    # Pick the best of explicit candidates
    >>> ts.best_match("apple", ["apples", "banana", "grape"]).best.text
    'apples'

    # Fuzzy search inside text
    >>> ts.fuzzy_match("Hello, wrld!", "world", max_edit_distance=2)
    ['wrld']
"""

import logging
from importlib.metadata import version as _get_version

# Register the .textsim expression namespace
import textsim.expr  # noqa: F401
from textsim.batch import (
    best_match,
    best_matches,
    pairwise,
    similarity,
    similarity_matrix,
)
from textsim.enums import DEFAULT_ALGORITHM, Algorithm
from textsim.exceptions import AlgorithmError, TextSimError, ValidationError
from textsim.index import SimilarityIndex
from textsim.metrics import (
    DEFAULT_PREFIX_WEIGHT,
    MAX_PREFIX_LENGTH,
    common_prefix_length,
    dice_coefficient,
    extract_bigrams,
    jaccard_index,
    jaro_similarity,
    jaro_winkler_similarity,
    levenshtein,
    levenshtein_similarity,
    score,
)
from textsim.results import BestMatch, RankedMatch
from textsim.search import fuzzy_match, highlight, nth_index_of, proximity_check

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("textsim")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "TextSimError",
    "AlgorithmError",
    "ValidationError",
    # Result types
    "RankedMatch",
    "BestMatch",
    # Enums and defaults
    "Algorithm",
    "DEFAULT_ALGORITHM",
    "DEFAULT_PREFIX_WEIGHT",
    "MAX_PREFIX_LENGTH",
    # Similarity functions
    "score",
    "dice_coefficient",
    "levenshtein",
    "levenshtein_similarity",
    "jaccard_index",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "extract_bigrams",
    "common_prefix_length",
    # Batch processing
    "similarity",
    "best_match",
    "best_matches",
    "pairwise",
    "similarity_matrix",
    # Index
    "SimilarityIndex",
    # Text search
    "fuzzy_match",
    "proximity_check",
    "highlight",
    "nth_index_of",
]


# Convenience aliases
edit_distance = levenshtein
