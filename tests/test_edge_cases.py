"""
Edge case tests for fuzzycache.

Tests cover:
- Empty strings and whitespace-only input
- Unicode candidates and queries
- Very long strings
- Duplicate candidates
- Large caches patched by a single mutation
"""

import pytest

from fuzzycache import FuzzyIndex, rank_one


class TestEmptyStrings:
    """Tests for empty and whitespace input."""

    def test_empty_query_matches_nothing(self):
        index = FuzzyIndex(["", "a", " "])
        assert index.search("") == []

    def test_whitespace_query(self):
        index = FuzzyIndex(["hello world"])
        assert index.search("   ") == []

    def test_empty_candidate_never_matches(self):
        index = FuzzyIndex(["", "a"])
        assert index.search("a") == ["a"]

    def test_add_empty_candidate(self):
        index = FuzzyIndex(["a"])
        index.search("a")
        index.add("")
        assert index.search("a") == ["a"]
        assert len(index) == 2

    def test_remove_empty_candidate(self):
        index = FuzzyIndex(["", "a"])
        index.remove("")
        assert index.get_items() == ["a"]


class TestUnicode:
    """Tests for non-ASCII input."""

    def test_accented(self):
        index = FuzzyIndex(["café", "cafe", "caffè"])
        assert "café" in index.search("café")

    def test_cjk(self):
        index = FuzzyIndex(["東京都", "京都", "大阪"])
        assert sorted(index.search("京都")) == sorted(["東京都", "京都"])

    def test_emoji(self):
        index = FuzzyIndex(["pizza 🍕", "sushi 🍣"])
        assert index.search("pizza") == ["pizza 🍕"]

    def test_unicode_add_and_remove(self):
        index = FuzzyIndex(["привет"])
        index.search("прив")
        index.add("приветствие")
        assert sorted(index.search("прив")) == sorted(["привет", "приветствие"])
        index.remove("привет")
        assert index.search("прив") == ["приветствие"]


class TestLongStrings:
    """Tests for long candidates."""

    def test_long_candidate(self):
        long_str = "a" * 5000 + "needle" + "b" * 5000
        index = FuzzyIndex([long_str, "needle"])
        results = index.search("needle")
        assert results[0] == "needle"
        assert long_str in results

    def test_long_query_no_match(self):
        index = FuzzyIndex(["short"])
        assert index.search("x" * 1000) == []


class TestDuplicates:
    """Tests for duplicate candidates."""

    def test_duplicates_all_returned(self):
        index = FuzzyIndex(["same", "same", "same"])
        assert index.search("same") == ["same", "same", "same"]

    def test_remove_all_duplicates_one_by_one(self):
        index = FuzzyIndex(["same", "same"])
        index.search("same")
        index.remove("same")
        assert index.search("same") == ["same"]
        index.remove("same")
        assert index.search("same") == []
        index.remove("same")
        assert index.get_items() == []


class TestManyCachedQueries:
    """A single mutation repairs every cached query."""

    @pytest.fixture
    def index(self):
        index = FuzzyIndex([f"item_{i}" for i in range(50)])
        for i in range(50):
            index.search(f"item_{i}")
        return index

    def test_add_reaches_all_entries(self, index):
        index.add("item_1")
        assert index.search("item_1").count("item_1") == 2
        # "item_1" is not a subsequence of "item_2"
        assert "item_1" not in index.search("item_2")
        assert len(index.cached_queries()) == 50

    def test_remove_reaches_all_entries(self, index):
        index.remove("item_10")
        for query in index.cached_queries():
            assert "item_10" not in index.search(query)

    def test_exact_match_stays_first(self, index):
        index.add("item_49_extra")
        assert index.search("item_49")[0] == "item_49"
        assert rank_one("item_49", "item_49_extra") is not None
        assert "item_49_extra" in index.search("item_49")
