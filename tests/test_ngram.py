"""Tests for bigram-based similarity: Dice coefficient and Jaccard index.

This module tests bigram extraction, multiset counting in the Dice
coefficient, whitespace handling, and the short-string conventions.
"""

import pytest

import textsim as ts


class TestBigrams:
    """Tests for bigram extraction."""

    def test_extract_bigrams(self):
        assert ts.extract_bigrams("hello") == ["he", "el", "ll", "lo"]

    def test_short_strings(self):
        assert ts.extract_bigrams("a") == []
        assert ts.extract_bigrams("") == []

    def test_repeated_bigrams_kept(self):
        assert ts.extract_bigrams("aaa") == ["aa", "aa"]


class TestDice:
    """Tests for the Dice coefficient (default algorithm)."""

    def test_apple_apples(self):
        # 4 shared bigrams: 2 * 4 / (5 + 6 - 2)
        assert ts.dice_coefficient("apple", "apples") == pytest.approx(0.8889, abs=1e-4)
        assert ts.score("apple", "apples", "dice") == pytest.approx(8 / 9)

    def test_default_algorithm_is_dice(self):
        assert ts.score("apple", "apples") == ts.dice_coefficient("apple", "apples")
        assert ts.DEFAULT_ALGORITHM is ts.Algorithm.DICE

    def test_no_shared_bigrams(self):
        assert ts.dice_coefficient("apple", "orange") == 0.0

    def test_whitespace_is_ignored(self):
        assert ts.dice_coefficient("new york", "newyork") == 1.0
        assert ts.dice_coefficient("  ", "\t") == 1.0

    def test_repeated_bigram_counted_once_per_source_occurrence(self):
        # "aa" has one "aa" bigram, "aaa" has two; only one can pair up
        assert ts.dice_coefficient("aa", "aaa") == pytest.approx(2 / 3)
        assert ts.dice_coefficient("aaa", "aa") == pytest.approx(2 / 3)

    def test_short_strings(self):
        assert ts.dice_coefficient("a", "ab") == 0.0
        assert ts.dice_coefficient("a", "a") == 1.0
        assert ts.dice_coefficient("a", "b") == 0.0

    def test_empty_strings(self):
        assert ts.score("", "apple", "dice") == 0.0
        assert ts.score("apple", "", "dice") == 0.0
        assert ts.score("", "", "dice") == 1.0


class TestJaccard:
    """Tests for the bigram-set Jaccard index."""

    def test_apple_apples(self):
        # {ap, pp, pl, le} vs {ap, pp, pl, le, es}
        assert ts.jaccard_index("apple", "apples") == 0.8

    def test_no_shared_bigrams(self):
        assert ts.score("apple", "orange", "jaccard") == 0.0

    def test_multiplicity_ignored(self):
        assert ts.jaccard_index("aaaa", "aa") == 1.0

    def test_empty_strings(self):
        assert ts.score("", "apple", "jaccard") == 0.0
        assert ts.score("apple", "", "jaccard") == 0.0
        assert ts.score("", "", "jaccard") == 1.0

    def test_single_characters(self):
        assert ts.jaccard_index("a", "b") == 0.0
        assert ts.jaccard_index("a", "a") == 1.0
        assert ts.jaccard_index("a", "ab") == 0.0

    def test_whitespace_is_significant(self):
        assert ts.jaccard_index("new york", "newyork") < 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
