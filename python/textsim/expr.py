"""Polars expression namespace for string similarity.

This module registers a `.textsim` namespace on Polars expressions,
enabling similarity scoring and fuzzy search directly in Polars
expression contexts. All operations are evaluated row by row with
``map_elements``.

Example:
    >>> import polars as pl
    >>> import textsim  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["apple", "apples", "grape"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").textsim.is_similar("apple", min_similarity=0.8)
    ... )
"""

from typing import List, Union

import polars as pl

from textsim._utils import check_unit_interval, normalize_algorithm
from textsim.batch import best_matches
from textsim.enums import DEFAULT_ALGORITHM, Algorithm
from textsim.metrics import get_metric, levenshtein
from textsim.search import fuzzy_match


def _text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("textsim")
class TextSimExprNamespace:
    """
    String similarity namespace for Polars expressions.

    Access via `.textsim` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Similarity algorithm to use (string or Algorithm enum)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Raises:
            AlgorithmError: If the algorithm is not recognized.

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").textsim.similarity("apple")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").textsim.similarity(pl.col("name2"), "levenshtein")
            ... )
        """
        sim_func = get_metric(algorithm)

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: sim_func(_text(s), other),
                return_dtype=pl.Float64,
                skip_nulls=False,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: sim_func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Example:
            >>> df.filter(pl.col("name").textsim.is_similar("apple", min_similarity=0.85))
        """
        check_unit_interval("min_similarity", min_similarity)
        return self.similarity(other, algorithm=algorithm) >= min_similarity

    def distance(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Calculate Levenshtein edit distance to another value/column.

        Returns:
            Expression producing integer distances
        """
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: levenshtein(_text(s), other),
                return_dtype=pl.Int64,
                skip_nulls=False,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: levenshtein(_text(row["_left"]), _text(row["_right"])),
            return_dtype=pl.Int64,
        )

    def best_match(
        self,
        choices: List[str],
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the highest-scoring string from a list of choices.

        Args:
            choices: List of strings to match against
            algorithm: Similarity algorithm to use (string or Algorithm enum)
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> fruits = ["apple", "banana", "grape"]
            >>> df.with_columns(fruit=pl.col("raw").textsim.best_match(fruits))
        """
        algo = normalize_algorithm(algorithm)
        check_unit_interval("min_similarity", min_similarity)

        def find_best(value):
            results = best_matches(
                choices, _text(value), algorithm=algo, limit=1, min_similarity=min_similarity
            )
            return results[0].text if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8, skip_nulls=False)

    def fuzzy_match(self, query: str, max_edit_distance: int = 2) -> pl.Expr:
        """
        Tokens of each document within an edit-distance budget of query.

        Returns:
            Expression producing a list of matched tokens per row

        Example:
            >>> df.with_columns(hits=pl.col("text").textsim.fuzzy_match("world"))
        """
        return self._expr.map_elements(
            lambda s: fuzzy_match(_text(s), query, max_edit_distance=max_edit_distance),
            return_dtype=pl.List(pl.Utf8),
            skip_nulls=False,
        )
