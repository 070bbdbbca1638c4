"""Tests for SimilarityIndex.

This module tests construction, the near-match check, ranked scoring and
search over a fixed candidate collection.
"""

import pytest

import textsim as ts


@pytest.fixture
def fruit_index():
    return ts.SimilarityIndex(["apple", "banana", "grape"])


class TestConstruction:
    """Tests for building an index."""

    def test_duplicates_collapsed(self):
        index = ts.SimilarityIndex(["apple", "banana", "apple", "grape", "banana"])
        assert len(index) == 3
        assert index.get_items() == ["apple", "banana", "grape"]

    def test_accepts_any_iterable(self):
        index = ts.SimilarityIndex(word for word in ["a", "b", "c"])
        assert len(index) == 3

    def test_empty_index(self):
        index = ts.SimilarityIndex()
        assert len(index) == 0
        assert not index.contains_similar("apple", 0.0)
        assert index.rank_against("apple") == []

    def test_get_items_returns_copy(self, fruit_index):
        items = fruit_index.get_items()
        items.append("cherry")
        assert "cherry" not in fruit_index
        assert len(fruit_index) == 3

    def test_no_mutation_api(self, fruit_index):
        assert not hasattr(fruit_index, "add")
        assert not hasattr(fruit_index, "remove")

    def test_membership_and_iteration(self, fruit_index):
        assert "apple" in fruit_index
        assert "apples" not in fruit_index
        assert list(fruit_index) == ["apple", "banana", "grape"]

    def test_repr(self, fruit_index):
        assert repr(fruit_index) == "SimilarityIndex(size=3)"


class TestContainsSimilar:
    """Tests for contains_similar."""

    def test_exact_match(self, fruit_index):
        assert fruit_index.contains_similar("apple", 0.8)

    def test_similar_string_above_threshold(self, fruit_index):
        assert fruit_index.contains_similar("apples", 0.8)

    def test_dissimilar_string(self, fruit_index):
        assert not fruit_index.contains_similar("orange", 0.9)

    def test_exact_matches_excluded(self, fruit_index):
        assert not fruit_index.contains_similar("ankle", 0.8, include_exact_matches=False)

    def test_exact_match_short_circuits_threshold(self, fruit_index):
        # No score can reach 1.5, only the exact-match check can succeed
        assert fruit_index.contains_similar("apple", 1.5)
        assert not fruit_index.contains_similar("apple", 1.5, include_exact_matches=False)

    def test_exact_match_still_scores_when_excluded(self, fruit_index):
        # Identical strings score 1.0 under Dice, so they still pass a normal threshold
        assert fruit_index.contains_similar("apple", 0.9, include_exact_matches=False)

    def test_empty_candidates_never_match(self):
        index = ts.SimilarityIndex([""])
        assert not index.contains_similar("", 0.0)
        assert not index.contains_similar("apple", 0.0)

    def test_uses_dice(self):
        index = ts.SimilarityIndex(["new york"])
        # Dice ignores whitespace
        assert index.contains_similar("newyork", 1.0, include_exact_matches=False)


class TestRankAgainst:
    """Tests for rank_against."""

    def test_one_entry_per_candidate_in_order(self, fruit_index):
        results = fruit_index.rank_against("apple")
        assert [r.text for r in results] == ["apple", "banana", "grape"]
        assert results[0] == ts.RankedMatch("apple", 1.0)
        assert results[1].score == 0.0
        assert results[2].score == pytest.approx(0.25)

    def test_includes_empty_candidates(self):
        index = ts.SimilarityIndex(["", "apple"])
        results = index.rank_against("", "levenshtein")
        assert results == [ts.RankedMatch("", 1.0), ts.RankedMatch("apple", 0.0)]

    def test_algorithm_selection(self, fruit_index):
        results = fruit_index.rank_against("apple", ts.Algorithm.JACCARD)
        assert results[2].score == pytest.approx(1 / 7)


class TestSearch:
    """Tests for the sorted search convenience."""

    def test_sorted_descending(self):
        index = ts.SimilarityIndex(["grape", "apply", "apple", "banana"])
        results = index.search("apples")
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0].text == "apple"

    def test_min_similarity_and_limit(self):
        index = ts.SimilarityIndex(["grape", "apply", "apple", "banana"])
        results = index.search("apples", min_similarity=0.5, limit=1)
        assert [r.text for r in results] == ["apple"]

    def test_invalid_min_similarity(self, fruit_index):
        with pytest.raises(ts.ValidationError):
            fruit_index.search("apple", min_similarity=2.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
