"""
TF-IDF relevance scorer.

Formula:
    relevance(doc) = Σ tf(term, doc) × idf(term)    over plus words

Where:
    tf = term occurrences in doc / retained words in doc
    idf = ln(total documents / documents containing term)

Filtering:
    - Plus words missing from the index contribute nothing
    - The caller's predicate (id, status, rating) gates which documents
      accumulate relevance
    - Any document containing a minus word is dropped afterwards,
      whatever the predicate says
"""

import logging
import math
from typing import Callable, Dict, List

from .document_store import Document, DocumentStatus, DocumentStore
from .inverted_index import InvertedIndex
from .query_parser import Query

logger = logging.getLogger(__name__)

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class TfIdfScorer:
    """
    Scores documents of one index/store pair against parsed queries.

    Reads the index and store it is given; never modifies them.
    """

    def __init__(self, index: InvertedIndex, documents: DocumentStore):
        self.index = index
        self.documents = documents

    def inverse_document_frequency(self, term: str) -> float:
        """
        ln(N / df) for an indexed term.

        Callers skip terms with df == 0 before asking.
        """
        return math.log(len(self.documents) / self.index.document_frequency(term))

    def score(self, query: Query, predicate: DocumentPredicate) -> List[Document]:
        """
        Compute relevance for every document matching the query.

        Args:
            query: Parsed query (plus words iterate lexicographically)
            predicate: Called as predicate(document_id, status, rating)

        Returns:
            Unsorted Documents in first-accumulated order
        """
        document_to_relevance: Dict[int, float] = {}

        for word in query.plus_words:
            if word not in self.index:
                continue

            idf = self.inverse_document_frequency(word)
            for document_id, term_frequency in self.index.postings(word).items():
                data = self.documents.get(document_id)
                if predicate(document_id, data.status, data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_frequency * idf
                    )

        for word in query.minus_words:
            for document_id in self.index.postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(
                id=document_id,
                relevance=relevance,
                rating=self.documents.get(document_id).rating,
            )
            for document_id, relevance in document_to_relevance.items()
        ]
