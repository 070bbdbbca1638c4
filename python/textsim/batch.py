"""Batch operations API for textsim.

This module provides list-based helpers on top of the metrics in
``textsim.metrics``: scoring a query against many strings, picking a best
match, and building pairwise or full similarity matrices.

Example usage:
    >>> import textsim.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["apple", "apply", "grape"], "apples")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('apple', 0.89), ('apply', 0.67), ('grape', 0.22)]

    # Pick the best candidate
    >>> result = batch.best_match("apple", ["apples", "banana", "grape"])
    >>> result.best.text, result.best_index
    ('apples', 0)

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hello", "world"])
    [1.0, 1.0]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textsim._utils import check_unit_interval, normalize_algorithm
from textsim.enums import DEFAULT_ALGORITHM, Algorithm
from textsim.exceptions import AlgorithmError, ValidationError
from textsim.metrics import score
from textsim.results import BestMatch, RankedMatch

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "similarity",
    "best_match",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


def similarity(
    strings: Sequence[str],
    query: str,
    algorithm: str | Algorithm = DEFAULT_ALGORITHM,
) -> list[RankedMatch]:
    """Compute similarity of a query against all strings.

    Results are returned in the same order as the input strings.

    Args:
        strings: Strings to compare against the query.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum).

    Returns:
        List of RankedMatch objects in input order.
    """
    return [RankedMatch(text, score(text, query, algorithm)) for text in strings]


def _improves(algorithm: Algorithm, candidate: float, current: float) -> bool:
    # The normalized edit-distance entry is treated as a distance here:
    # a lower value replaces the running best.
    if algorithm is Algorithm.LEVENSHTEIN:
        return candidate < current
    return candidate > current


def best_match(
    source: str,
    candidates: Sequence[str],
    algorithm: str | Algorithm = DEFAULT_ALGORITHM,
) -> BestMatch:
    """Score source against each candidate and select one.

    The first candidate is the running best and is only replaced by a later
    candidate that strictly improves on it, so ties go to the earlier
    candidate. For ``Algorithm.LEVENSHTEIN`` a strictly *lower* score counts
    as an improvement; for every other algorithm, ``Algorithm.JARO_WINKLER``
    included, a strictly higher one does.

    Args:
        source: The string to match.
        candidates: Explicit candidate list; independent of any index.
        algorithm: Similarity algorithm to use (string or Algorithm enum).

    Returns:
        BestMatch with the full ranking, the selected entry and its index.
        An empty candidate list gives ``BestMatch([], None, -1)``.

    Example:
        >>> best_match("apple", []).best_index
        -1
    """
    if not candidates:
        return BestMatch()

    # Keep a recognized member for the comparison; unknown names score 0.0
    # everywhere and leave the first candidate selected.
    algo = _safe_algorithm(algorithm)

    ranking = [RankedMatch(target, score(source, target, algorithm)) for target in candidates]

    best_index = 0
    for index, entry in enumerate(ranking):
        if _improves(algo, entry.score, ranking[best_index].score):
            best_index = index

    return BestMatch(ranking=ranking, best=ranking[best_index], best_index=best_index)


def _safe_algorithm(algorithm: str | Algorithm) -> Algorithm:
    try:
        return normalize_algorithm(algorithm)
    except AlgorithmError:
        return DEFAULT_ALGORITHM


def best_matches(
    strings: Sequence[str],
    query: str,
    algorithm: str | Algorithm = DEFAULT_ALGORITHM,
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[RankedMatch]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending, and returns the top
    matches up to the specified limit. Equal scores keep input order.

    Args:
        strings: Strings to search.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum).
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of RankedMatch objects sorted by score descending.

    Raises:
        ValidationError: If min_similarity is not in [0.0, 1.0] or limit
            is negative.

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "apples", limit=2)
        >>> [m.text for m in matches]
        ['apple', 'apply']
    """
    check_unit_interval("min_similarity", min_similarity)
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")

    scored = [r for r in similarity(strings, query, algorithm) if r.score >= min_similarity]
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored[:limit]


def pairwise(
    left: Sequence[str],
    right: Sequence[str],
    algorithm: str | Algorithm = DEFAULT_ALGORITHM,
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        algorithm: Similarity algorithm to use (string or Algorithm enum).

    Returns:
        List of similarity scores, one for each ``(left[i], right[i])`` pair.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    return [score(a, b, algorithm) for a, b in zip(left, right)]


def similarity_matrix(
    queries: Sequence[str],
    choices: Sequence[str],
    algorithm: str | Algorithm = DEFAULT_ALGORITHM,
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where ``result[i][j]`` is the similarity between
        ``queries[i]`` and ``choices[j]``.

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    return [[score(query, choice, algorithm) for choice in choices] for query in queries]
