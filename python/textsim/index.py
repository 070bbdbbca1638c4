"""SimilarityIndex for repeated similarity queries against a fixed collection.

This module provides a construct-once, read-many collection of candidate
strings, buildable from Python lists or Polars Series, answering "is anything
here close enough to X?" and ranked scoring queries.

Note:
    The candidate collection is never mutated after ``__init__`` returns, so
    a fully constructed index can be shared between threads without locking.
"""

import logging
from typing import Iterable, Iterator, List, Union

import polars as pl

from textsim._utils import check_unit_interval
from textsim.batch import best_matches
from textsim.enums import DEFAULT_ALGORITHM, Algorithm
from textsim.metrics import dice_coefficient, score
from textsim.results import RankedMatch

logger = logging.getLogger(__name__)


class SimilarityIndex:
    """
    An immutable collection of candidate strings for similarity queries.

    Duplicates are collapsed when the index is built; the first occurrence
    of each string fixes its position. There is no insert or remove API.

    Thread safety:
        Read-only after construction. Concurrent readers from multiple
        threads are safe once the constructor has returned.

    Example:
        >>> from textsim import SimilarityIndex
        >>>
        >>> index = SimilarityIndex(["apple", "banana", "grape"])
        >>> index.contains_similar("apples", threshold=0.8)
        True
        >>> index.contains_similar("orange", threshold=0.9)
        False
        >>> [(m.text, round(m.score, 2)) for m in index.rank_against("apple")]
        [('apple', 1.0), ('banana', 0.0), ('grape', 0.25)]
    """

    def __init__(self, items: Iterable[str] = ()):
        """
        Create a SimilarityIndex from an iterable of strings.

        Args:
            items: Candidate strings. Duplicates are dropped.
        """
        self._items = tuple(dict.fromkeys(items))
        logger.debug("Built SimilarityIndex with %d candidates", len(self._items))

    @classmethod
    def from_series(cls, series: "pl.Series") -> "SimilarityIndex":
        """
        Create a SimilarityIndex from a Polars Series.

        Null values become empty strings.

        Example:
            >>> names = pl.Series(["Apple", "Microsoft", None])
            >>> len(SimilarityIndex.from_series(names))
            3
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items)

    @classmethod
    def from_dataframe(cls, df: "pl.DataFrame", column: str) -> "SimilarityIndex":
        """Create a SimilarityIndex from a DataFrame column."""
        return cls.from_series(df[column])

    def contains_similar(
        self,
        target: str,
        threshold: float,
        include_exact_matches: bool = True,
    ) -> bool:
        """
        Check whether any candidate is similar enough to target.

        Candidates that are empty strings never match. With
        ``include_exact_matches`` an identical candidate matches before any
        scoring happens. Otherwise a candidate matches when its bigram-overlap
        (Dice) score against target is at least ``threshold``.

        Args:
            target: String to look for.
            threshold: Minimum Dice score for a match.
            include_exact_matches: Accept identical strings regardless of
                threshold.

        Returns:
            True on the first matching candidate, False if none match.
        """
        for candidate in self._items:
            if not candidate:
                continue
            if include_exact_matches and candidate == target:
                return True
            if dice_coefficient(candidate, target) >= threshold:
                return True
        return False

    def rank_against(
        self,
        target: str,
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
    ) -> List[RankedMatch]:
        """
        Score every candidate against target.

        Returns one RankedMatch per candidate, empty candidates included, in
        index order. The result is not sorted; see :meth:`search` for ranked
        output.
        """
        return [
            RankedMatch(candidate, score(candidate, target, algorithm))
            for candidate in self._items
        ]

    def search(
        self,
        query: str,
        min_similarity: float = 0.0,
        limit: int = 10,
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
    ) -> List[RankedMatch]:
        """
        Search the index for strings similar to the query.

        Args:
            query: Query string to search for
            min_similarity: Minimum similarity score (0.0 to 1.0)
            limit: Maximum number of results to return
            algorithm: Similarity algorithm to use

        Returns:
            RankedMatch objects sorted by score descending
        """
        return best_matches(
            self._items, query, algorithm=algorithm, limit=limit, min_similarity=min_similarity
        )

    def search_series(
        self,
        queries: "pl.Series",
        min_similarity: float = 0.0,
        limit: int = 1,
        include_query: bool = True,
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            min_similarity: Minimum similarity score (0.0 to 1.0)
            limit: Maximum matches per query (default: 1 for best match only)
            include_query: Include query column in results
            algorithm: Similarity algorithm to use

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched candidate
            - match_idx: Position of the match in the index
            - score: Similarity score
        """
        check_unit_interval("min_similarity", min_similarity)
        positions = {item: i for i, item in enumerate(self._items)}
        rows = []

        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            matches = self.search(
                str(query), min_similarity=min_similarity, limit=limit, algorithm=algorithm
            )

            for match in matches:
                row = {
                    "query_idx": query_idx,
                    "match": match.text,
                    "match_idx": positions[match.text],
                    "score": match.score,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        columns = ["query_idx", "match", "match_idx", "score"]
        if include_query:
            columns.insert(1, "query")

        if not rows:
            schema = {"query_idx": pl.Int64, "match": pl.Utf8, "match_idx": pl.Int64, "score": pl.Float64}
            if include_query:
                schema["query"] = pl.Utf8
            return pl.DataFrame(schema=schema).select(columns)

        return pl.DataFrame(rows).select(columns)

    def get_items(self) -> List[str]:
        """Return the indexed candidates in index order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SimilarityIndex(size={len(self._items)})"


__all__ = ["SimilarityIndex"]
