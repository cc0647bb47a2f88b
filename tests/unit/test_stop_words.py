"""
Unit tests for the immutable stop-word set.
"""

import pytest

from src.search.errors import InvalidArgumentError
from src.search.stop_words import StopWords


class TestStopWords:

    def test_from_string(self):
        stop_words = StopWords("in  the on ")
        assert "in" in stop_words
        assert "the" in stop_words
        assert "on" in stop_words
        assert len(stop_words) == 3

    def test_from_iterable(self):
        """Empty strings are dropped, duplicates collapse"""
        stop_words = StopWords(["on", "", "at", "on"])
        assert len(stop_words) == 2
        assert list(stop_words) == ["at", "on"]

    def test_empty(self):
        assert len(StopWords()) == 0
        assert len(StopWords("")) == 0
        assert "cat" not in StopWords()

    def test_invalid_stop_word(self):
        with pytest.raises(InvalidArgumentError):
            StopWords("in t\x01he")

        with pytest.raises(InvalidArgumentError):
            StopWords(["in", "o\x1fn"])

    def test_filter_preserves_order_and_duplicates(self):
        stop_words = StopWords("and")
        assert stop_words.filter(["cat", "and", "dog", "cat"]) == ["cat", "dog", "cat"]

    def test_immutable(self):
        stop_words = StopWords("in")
        with pytest.raises(AttributeError):
            stop_words.extra = "on"
