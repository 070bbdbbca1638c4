"""Fuzzy text search over free-form documents.

Documents are split on whitespace into tokens; ``fuzzy_match`` additionally
removes the characters ``. , ! ?`` from every token before comparing it with
the query by normalized Levenshtein similarity.

Example usage:
    >>> from textsim import fuzzy_match, proximity_check
    >>> fuzzy_match("Hello, wrld!", "world", max_edit_distance=2)
    ['wrld']
    >>> proximity_check("The quick brown fox jumps over the lazy dog", "fox", "dog", 5)
    True
"""

import logging
import re
from typing import List

from textsim._utils import tokenize
from textsim.exceptions import ValidationError
from textsim.metrics import levenshtein_similarity

logger = logging.getLogger(__name__)


def fuzzy_match(document: str, query: str, max_edit_distance: int = 2) -> List[str]:
    """Return the tokens of document within an edit-distance budget of query.

    The budget is turned into one similarity threshold for the whole call,
    ``1 - max_edit_distance / max(len(query), longest token)``, so a single
    long token tightens the threshold for every comparison.

    Tokens come from ``str.split()``, so leading or trailing whitespace never
    produces an empty token; only punctuation-only words become ``""``.

    Args:
        document: Text to search.
        query: Word to look for.
        max_edit_distance: Edit budget used to derive the threshold.

    Returns:
        Matching tokens in document order, repeats included.

    Raises:
        ValidationError: If max_edit_distance is negative.
    """
    if max_edit_distance < 0:
        raise ValidationError(f"max_edit_distance must be non-negative, got {max_edit_distance}")

    tokens = tokenize(document)
    if not tokens:
        return []

    longest = max(len(query), max(len(token) for token in tokens))
    if longest == 0:
        # Every token and the query are empty strings
        return tokens

    threshold = 1.0 - max_edit_distance / longest
    logger.debug(
        "fuzzy_match: %d tokens, query=%r, threshold=%.4f", len(tokens), query, threshold
    )
    return [token for token in tokens if levenshtein_similarity(token, query) >= threshold]


def proximity_check(document: str, word1: str, word2: str, max_word_distance: int) -> bool:
    """Check whether two words occur within max_word_distance tokens of each other.

    Tokens are whitespace-delimited and compared exactly (no punctuation
    removal). The latest position of each word is tracked in a single pass.
    """
    index1 = None
    index2 = None

    for i, word in enumerate(document.split()):
        if word == word1:
            index1 = i
        if word == word2:
            index2 = i
        if index1 is not None and index2 is not None and abs(index1 - index2) <= max_word_distance:
            return True

    return False


def highlight(text: str, substring: str, tag: str = "mark") -> str:
    """Wrap every case-insensitive occurrence of substring in ``<tag>``.

    Example:
        >>> highlight("Hello, world!", "world")
        'Hello, <mark>world</mark>!'
    """
    if not substring:
        return text
    pattern = re.compile(re.escape(substring), re.IGNORECASE)
    return pattern.sub(lambda m: f"<{tag}>{m.group(0)}</{tag}>", text)


def nth_index_of(text: str, substring: str, occurrence: int) -> int:
    """Index of the nth (1-based) occurrence of substring, or -1."""
    if occurrence < 1:
        return -1
    index = -1
    for _ in range(occurrence):
        index = text.find(substring, index + 1)
        if index == -1:
            return -1
    return index


__all__ = ["fuzzy_match", "proximity_check", "highlight", "nth_index_of"]
