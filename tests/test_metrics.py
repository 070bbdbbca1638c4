"""Tests for algorithm dispatch through ``score``.

Covers algorithm name handling, the degenerate-input conventions shared by
every algorithm, and the logged 0.0 fallback for unrecognized algorithms.
"""

import logging

import pytest

import textsim as ts
from textsim._utils import normalize_algorithm

ALL_ALGORITHMS = list(ts.Algorithm)


class TestScoreDispatch:
    """Tests for selecting a metric by Algorithm or name."""

    def test_enum_and_string_agree(self):
        for algo in ALL_ALGORITHMS:
            assert ts.score("apple", "apples", algo) == ts.score("apple", "apples", algo.value)

    def test_dispatch_targets(self):
        assert ts.score("kitten", "sitting", "dice") == ts.dice_coefficient("kitten", "sitting")
        assert ts.score("kitten", "sitting", "levenshtein") == ts.levenshtein_similarity(
            "kitten", "sitting"
        )
        assert ts.score("kitten", "sitting", "jaccard") == ts.jaccard_index("kitten", "sitting")
        assert ts.score("kitten", "sitting", "jaro_winkler") == ts.jaro_winkler_similarity(
            "kitten", "sitting"
        )

    def test_algorithm_names_are_case_insensitive(self):
        assert ts.score("apple", "apples", "LEVENSHTEIN") == ts.score(
            "apple", "apples", ts.Algorithm.LEVENSHTEIN
        )

    def test_jaro_winkler_aliases(self):
        expected = ts.score("hello", "hallo", ts.Algorithm.JARO_WINKLER)
        assert ts.score("hello", "hallo", "jaro-winkler") == expected
        assert ts.score("hello", "hallo", "Jaro_Winkler") == expected

    def test_algorithms_give_different_rankings(self):
        index = ts.SimilarityIndex(["apple", "banana", "grape"])
        dice = index.rank_against("apple", "dice")
        levenshtein = index.rank_against("apple", "levenshtein")
        jaccard = index.rank_against("apple", "jaccard")
        assert dice != levenshtein
        assert dice != jaccard
        assert levenshtein != jaccard


class TestDegenerateInputs:
    """Conventions for empty and identical strings, for every algorithm."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_both_empty_is_identical(self, algorithm):
        assert ts.score("", "", algorithm) == 1.0

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_one_empty_is_dissimilar(self, algorithm):
        assert ts.score("", "apple", algorithm) == 0.0
        assert ts.score("apple", "", algorithm) == 0.0

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    @pytest.mark.parametrize("text", ["a", "ab", "hello", "hello world", "Ünïcödé"])
    def test_identical_non_empty(self, algorithm, text):
        assert ts.score(text, text, algorithm) == 1.0


class TestUnknownAlgorithm:
    """An unrecognized algorithm is logged and scores 0.0."""

    def test_unknown_name_scores_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger="textsim.metrics"):
            assert ts.score("apple", "apple", "soundex") == 0.0
        assert "Unknown algorithm" in caplog.text

    def test_non_string_algorithm_scores_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger="textsim.metrics"):
            assert ts.score("apple", "apple", 42) == 0.0
        assert "must be str or Algorithm" in caplog.text

    def test_normalize_algorithm_raises(self):
        with pytest.raises(ts.AlgorithmError, match="Unknown algorithm"):
            normalize_algorithm("metaphone")

    def test_algorithm_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_algorithm("nope")

    def test_normalize_algorithm_returns_member(self):
        assert normalize_algorithm("dice") is ts.Algorithm.DICE
        assert normalize_algorithm(ts.Algorithm.JACCARD) is ts.Algorithm.JACCARD
        assert normalize_algorithm(" jaro-winkler ") is ts.Algorithm.JARO_WINKLER


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
