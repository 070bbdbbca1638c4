"""Internal utilities for textsim."""

import math
import re
from typing import List, Union

from textsim.enums import Algorithm
from textsim.exceptions import AlgorithmError, ValidationError

# Characters removed from every token before fuzzy comparison
TOKEN_PUNCTUATION = ".,!?"

_PUNCTUATION_RE = re.compile(f"[{re.escape(TOKEN_PUNCTUATION)}]")

# Alternate spellings accepted for algorithm names
_ALIASES = {
    "jaro-winkler": "jaro_winkler",
    "jarowinkler": "jaro_winkler",
}

VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> Algorithm:
    """Convert a string or Algorithm into an Algorithm member.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        The matching Algorithm member.

    Raises:
        AlgorithmError: If the name is not recognized or is not a string.

    Example:
        >>> normalize_algorithm("Jaro-Winkler")
        <Algorithm.JARO_WINKLER: 'jaro_winkler'>
    """
    if isinstance(algorithm, Algorithm):
        return algorithm

    if isinstance(algorithm, str):
        algo_lower = algorithm.strip().lower()
        algo_lower = _ALIASES.get(algo_lower, algo_lower)
        if algo_lower in VALID_ALGORITHMS:
            return Algorithm(algo_lower)
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise AlgorithmError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def tokenize(text: str) -> List[str]:
    """Split text on whitespace and drop ``. , ! ?`` from each token.

    Tokens made only of punctuation survive as empty strings.
    """
    return [_PUNCTUATION_RE.sub("", word) for word in text.split()]


def check_unit_interval(name: str, value: float) -> None:
    """Raise ValidationError unless value is a non-bool number in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be in range [0.0, 1.0], got {value!r}")


__all__ = [
    "normalize_algorithm",
    "tokenize",
    "check_unit_interval",
    "TOKEN_PUNCTUATION",
    "VALID_ALGORITHMS",
]
