"""String similarity metrics.

Every function here is pure: two strings in, one number out. All similarity
functions return a float in [0.0, 1.0] where 1.0 means identical under that
algorithm's definition.

Example usage:
    >>> import textsim as ts
    >>> round(ts.dice_coefficient("apple", "apples"), 4)
    0.8889
    >>> ts.levenshtein("kitten", "sitting")
    3
    >>> round(ts.jaro_winkler_similarity("hello", "hallo"), 2)
    0.88
    >>> round(ts.score("apple", "orange", "levenshtein"), 4)
    0.1667
"""

import logging
from collections import Counter
from typing import Callable, Dict, List, Set, Union

from textsim._utils import normalize_algorithm
from textsim.enums import DEFAULT_ALGORITHM, Algorithm
from textsim.exceptions import AlgorithmError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_WEIGHT = 0.1
MAX_PREFIX_LENGTH = 4

# Winkler's scaling factor must keep the boosted score <= 1.0
_MAX_PREFIX_WEIGHT = 0.25


def extract_bigrams(text: str) -> List[str]:
    """Return the overlapping 2-character windows of text, in order.

    Example:
        >>> extract_bigrams("hello")
        ['he', 'el', 'll', 'lo']
    """
    return [text[i : i + 2] for i in range(len(text) - 1)]


def _bigram_set(text: str) -> Set[str]:
    return set(extract_bigrams(text))


def dice_coefficient(source: str, target: str) -> float:
    """Bigram overlap (Sorensen-Dice) similarity.

    Whitespace is removed from both strings first. Repeated bigrams are
    counted as a multiset, so a bigram occurring twice in ``target`` but once
    in ``source`` only contributes once to the intersection.

    Args:
        source: First string.
        target: Second string.

    Returns:
        ``2 * |common bigrams| / (len(source) + len(target) - 2)``, 1.0 when the
        stripped strings are equal, and 0.0 when either stripped string is
        shorter than two characters.
    """
    source = "".join(source.split())
    target = "".join(target.split())

    if source == target:
        return 1.0
    if len(source) < 2 or len(target) < 2:
        return 0.0

    remaining = Counter(extract_bigrams(source))
    intersection = 0
    for bigram in extract_bigrams(target):
        if remaining[bigram] > 0:
            remaining[bigram] -= 1
            intersection += 1

    return (2.0 * intersection) / (len(source) + len(target) - 2)


def levenshtein(source: str, target: str) -> int:
    """Edit distance with unit cost for insert, delete and substitute.

    Uses two rolling rows instead of the full table.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    # Keep the shorter string along the row to bound memory
    if len(target) > len(source):
        source, target = target, source

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]


def levenshtein_similarity(source: str, target: str) -> float:
    """Levenshtein distance normalized to ``1 - distance / max(len)``.

    Two empty strings are identical (1.0).
    """
    max_len = max(len(source), len(target))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein(source, target) / max_len


def jaccard_index(source: str, target: str) -> float:
    """Jaccard index of the two strings' bigram sets.

    Bigram multiplicity is ignored. Equal strings (including two empty
    strings) score 1.0; when neither string has a bigram the result is 0.0.
    """
    if source == target:
        return 1.0

    source_bigrams = _bigram_set(source)
    target_bigrams = _bigram_set(target)
    union = source_bigrams | target_bigrams
    if not union:
        return 0.0
    return len(source_bigrams & target_bigrams) / len(union)


def jaro_similarity(source: str, target: str) -> float:
    """Jaro similarity.

    Characters match when equal and no further apart than
    ``max(len) // 2 - 1`` positions. Each character of ``source`` takes the
    leftmost unmatched equal character inside its window in ``target``.
    Half the number of out-of-order matched pairs gives the transposition
    count.
    """
    len_a = len(source)
    len_b = len(target)
    if len_a == 0 or len_b == 0:
        return 1.0 if len_a == len_b else 0.0

    window = max(0, max(len_a, len_b) // 2 - 1)
    a_matched = [False] * len_a
    b_matched = [False] * len_b

    matches = 0
    for i, char in enumerate(source):
        start = max(0, i - window)
        end = min(i + window + 1, len_b)
        for j in range(start, end):
            if b_matched[j] or target[j] != char:
                continue
            a_matched[i] = True
            b_matched[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    half_transpositions = 0
    k = 0
    for i in range(len_a):
        if not a_matched[i]:
            continue
        while not b_matched[k]:
            k += 1
        if source[i] != target[k]:
            half_transpositions += 1
        k += 1
    transpositions = half_transpositions / 2

    return (
        matches / len_a + matches / len_b + (matches - transpositions) / matches
    ) / 3


def common_prefix_length(source: str, target: str, limit: int = MAX_PREFIX_LENGTH) -> int:
    """Length of the shared prefix of source and target, capped at limit."""
    length = 0
    for a, b in zip(source, target):
        if a != b or length >= limit:
            break
        length += 1
    return length


def jaro_winkler_similarity(
    source: str,
    target: str,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    max_prefix: int = MAX_PREFIX_LENGTH,
) -> float:
    """Jaro-Winkler similarity.

    Boosts the Jaro score by the length of the common prefix of exactly
    ``source`` and ``target``: ``jaro + prefix * prefix_weight * (1 - jaro)``.

    Args:
        source: First string.
        target: Second string.
        prefix_weight: Scaling factor for the prefix boost, in [0.0, 0.25].
        max_prefix: Longest prefix that earns a boost.

    Raises:
        ValidationError: If prefix_weight is outside [0.0, 0.25].

    Example:
        >>> round(jaro_winkler_similarity("MARTHA", "MARHTA"), 4)
        0.9611
    """
    if not 0.0 <= prefix_weight <= _MAX_PREFIX_WEIGHT:
        raise ValidationError(
            f"prefix_weight must be in range [0.0, {_MAX_PREFIX_WEIGHT}], got {prefix_weight}"
        )

    jaro = jaro_similarity(source, target)
    prefix = common_prefix_length(source, target, limit=max_prefix)
    return jaro + prefix * prefix_weight * (1.0 - jaro)


_METRICS: Dict[Algorithm, Callable[[str, str], float]] = {
    Algorithm.DICE: dice_coefficient,
    Algorithm.LEVENSHTEIN: levenshtein_similarity,
    Algorithm.JACCARD: jaccard_index,
    Algorithm.JARO_WINKLER: jaro_winkler_similarity,
}


def get_metric(algorithm: Union[str, Algorithm]) -> Callable[[str, str], float]:
    """Return the similarity function for an algorithm.

    Raises:
        AlgorithmError: If the algorithm is not recognized.
    """
    return _METRICS[normalize_algorithm(algorithm)]


def score(
    source: str,
    target: str,
    algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
) -> float:
    """Similarity of source and target under the chosen algorithm.

    An unrecognized algorithm is logged and scores 0.0 instead of raising.

    Args:
        source: First string.
        target: Second string.
        algorithm: Algorithm enum or name. Options:
            - "dice": Bigram overlap (default)
            - "levenshtein": Normalized edit distance
            - "jaccard": Jaccard index over bigram sets
            - "jaro_winkler": Jaro-Winkler

    Returns:
        Similarity in [0.0, 1.0].
    """
    try:
        metric = get_metric(algorithm)
    except AlgorithmError as exc:
        logger.warning("Scoring %r against %r with 0.0: %s", source, target, exc)
        return 0.0
    return metric(source, target)


__all__ = [
    "DEFAULT_PREFIX_WEIGHT",
    "MAX_PREFIX_LENGTH",
    "extract_bigrams",
    "dice_coefficient",
    "levenshtein",
    "levenshtein_similarity",
    "jaccard_index",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "common_prefix_length",
    "get_metric",
    "score",
]
