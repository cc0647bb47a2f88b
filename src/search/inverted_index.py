"""
Inverted index: term -> {document id -> normalized term frequency}.

Each retained token of a document contributes 1 / word_count to its term's
frequency, so the frequencies recorded for one document sum to 1.0.
Entries are only ever added.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)

_EMPTY_POSTING: Mapping[int, float] = {}


def build_term_frequencies(words: List[str]) -> Dict[str, float]:
    """
    Normalized term frequencies for one document's retained words.

    Example:
        >>> build_term_frequencies(["fluffy", "cat", "fluffy", "tail"])
        {'fluffy': 0.5, 'cat': 0.25, 'tail': 0.25}
    """
    if not words:
        return {}

    inv_word_count = 1.0 / len(words)
    term_frequencies = defaultdict(float)
    for word in words:
        term_frequencies[word] += inv_word_count

    return dict(term_frequencies)


class InvertedIndex:
    """Posting lists keyed by term"""

    def __init__(self):
        self._postings: Dict[str, Dict[int, float]] = defaultdict(dict)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def add_document(self, document_id: int, words: List[str]) -> None:
        """Index a document's retained (stop-word-free) words"""
        term_frequencies = build_term_frequencies(words)
        for term, frequency in term_frequencies.items():
            self._postings[term][document_id] = frequency

        logger.debug(
            f"Indexed document {document_id}: {len(words)} words, {len(term_frequencies)} unique terms"
        )

    def postings(self, term: str) -> Mapping[int, float]:
        """Posting list for a term; empty mapping if the term is not indexed"""
        if term not in self._postings:
            return _EMPTY_POSTING
        return self._postings[term]

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term"""
        return len(self.postings(term))

    def contains(self, term: str, document_id: int) -> bool:
        """Whether the term is indexed under the document"""
        return document_id in self.postings(term)

    def term_frequencies(self, document_id: int) -> Dict[str, float]:
        """All terms indexed under a document with their frequencies"""
        return {
            term: posting[document_id]
            for term, posting in self._postings.items()
            if document_id in posting
        }
