"""
Unit tests for the inverted index and normalized term frequencies.
"""

import pytest

from src.search.inverted_index import InvertedIndex, build_term_frequencies


class TestTermFrequencies:

    def test_normalized(self):
        frequencies = build_term_frequencies(["fluffy", "cat", "fluffy", "tail"])
        assert frequencies == {
            "fluffy": pytest.approx(0.5),
            "cat": pytest.approx(0.25),
            "tail": pytest.approx(0.25),
        }

    def test_empty(self):
        assert build_term_frequencies([]) == {}

    @pytest.mark.parametrize(
        "words",
        [
            ["a"],
            ["a", "b", "c"],
            ["x", "y", "x", "z", "x", "y", "w"],
            ["same"] * 11,
        ],
    )
    def test_sum_is_one(self, words):
        assert sum(build_term_frequencies(words).values()) == pytest.approx(1.0, abs=1e-6)


class TestInvertedIndex:

    def test_postings(self):
        index = InvertedIndex()
        index.add_document(0, ["white", "cat", "collar"])
        index.add_document(1, ["fluffy", "cat", "fluffy", "tail"])

        assert index.postings("cat") == {0: pytest.approx(1 / 3), 1: pytest.approx(0.25)}
        assert index.postings("fluffy") == {1: pytest.approx(0.5)}
        assert index.document_frequency("cat") == 2
        assert len(index) == 5

    def test_missing_term_is_not_inserted(self):
        index = InvertedIndex()
        index.add_document(0, ["cat"])

        assert index.postings("dog") == {}
        assert index.document_frequency("dog") == 0
        assert "dog" not in index
        assert len(index) == 1

    def test_contains(self):
        index = InvertedIndex()
        index.add_document(3, ["groomed", "starling"])

        assert index.contains("groomed", 3)
        assert not index.contains("groomed", 4)
        assert not index.contains("dog", 3)

    def test_term_frequencies_per_document(self):
        index = InvertedIndex()
        index.add_document(0, ["a", "b", "c"])
        index.add_document(1, ["b", "b", "c"])

        frequencies = index.term_frequencies(1)
        assert frequencies == {"b": pytest.approx(2 / 3), "c": pytest.approx(1 / 3)}
        assert index.term_frequencies(9) == {}
