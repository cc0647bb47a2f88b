"""
SearchServer: in-memory document index with TF-IDF ranked retrieval.

Write path:
    text -> validate -> split -> drop stop words -> InvertedIndex + DocumentStore

Read path:
    query -> parse_query -> TfIdfScorer -> rank_documents

Not thread-safe: callers serialize add_document against reads.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

from .document_store import Document, DocumentData, DocumentStatus, DocumentStore
from .errors import InvalidArgumentError
from .inverted_index import InvertedIndex
from .query_parser import Query, parse_query
from .ranking import rank_documents
from .scorer import DocumentPredicate, TfIdfScorer
from .stop_words import StopWords
from .tokenizer import is_valid_word, split_into_words, validate_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Plus words found in a document, and the document's status"""

    words: Tuple[str, ...]
    status: DocumentStatus

    def __iter__(self):
        # Allows: words, status = server.match_document(...)
        return iter((self.words, self.status))


class SearchServer:
    """
    Document index answering plus/minus queries.

    Example:
        >>> server = SearchServer("and in on")
        >>> server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTIVE, [8, -3])
        >>> server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTIVE, [7, 2, 7])
        >>> [document.id for document in server.find_top_documents("fluffy cat")]
        [1, 0]
        >>> server.match_document("fluffy -collar", 0)
        MatchResult(words=(), status=<DocumentStatus.ACTIVE: 'ACTIVE'>)
    """

    def __init__(self, stop_words: Union[StopWords, str, Iterable[str], None] = None):
        if not isinstance(stop_words, StopWords):
            stop_words = StopWords(stop_words)
        self.stop_words = stop_words
        self._documents = DocumentStore()
        self._index = InvertedIndex()
        self._scorer = TfIdfScorer(self._index, self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._documents)

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """
        Index a new document.

        Args:
            document_id: Non-negative, unique id
            text: Space-separated words, no control characters
            status: Lifecycle status used by status filters
            ratings: User ratings; stored as their truncated integer mean

        Raises:
            InvalidArgumentError: if the id is negative or taken, or the text
                contains invalid characters. Nothing is stored on failure.
        """
        self._documents.check_new_id(document_id)
        validate_text(text)
        words = self._split_into_words_no_stop(text)

        data = self._documents.add(document_id, status, ratings)
        self._index.add_document(document_id, words)

        logger.debug(
            f"Added document {document_id}: status={data.status}, rating={data.rating}, words={len(words)}"
        )

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: Union[DocumentStatus, DocumentPredicate] = DocumentStatus.ACTIVE,
    ) -> List[Document]:
        """
        Best matching documents, at most MAX_RESULT_DOCUMENT_COUNT.

        Args:
            raw_query: Plus/minus query text
            status_or_predicate: Either a status to filter on (ACTIVE by
                default) or a callable predicate(document_id, status, rating)

        Raises:
            InvalidArgumentError: if the query is malformed
        """
        if isinstance(status_or_predicate, DocumentStatus):
            predicate = _status_predicate(status_or_predicate)
        else:
            predicate = status_or_predicate

        query = self._parse_query(raw_query)
        matched = self._scorer.score(query, predicate)
        ranked = rank_documents(matched)

        logger.debug(f"Query {raw_query!r}: {len(matched)} matched, returning {len(ranked)}")
        return ranked

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        """
        Explain how one document matches a query.

        Returns:
            MatchResult with the plus words found in the document (sorted),
            or no words if any minus word is found, plus the document status

        Raises:
            InvalidArgumentError: if the query is malformed
            DocumentNotFoundError: if document_id was never added
        """
        query = self._parse_query(raw_query)
        status = self._documents.get(document_id).status

        if any(self._index.contains(word, document_id) for word in query.minus_words):
            return MatchResult(words=(), status=status)

        words = tuple(
            word for word in query.plus_words if self._index.contains(word, document_id)
        )
        return MatchResult(words=words, status=status)

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        """
        Raises:
            OutOfRangeError: if index is negative or >= document count
        """
        return self._documents.id_at(index)

    def get_document(self, document_id: int) -> DocumentData:
        """
        Raises:
            DocumentNotFoundError: if document_id was never added
        """
        return self._documents.get(document_id)

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        """Indexed terms of a document with their normalized frequencies"""
        self._documents.get(document_id)
        return self._index.term_frequencies(document_id)

    def _split_into_words_no_stop(self, text: str) -> List[str]:
        words = split_into_words(text)
        for word in words:
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Word {word!r} contains invalid characters")
        return self.stop_words.filter(words)

    def _parse_query(self, raw_query: str) -> Query:
        try:
            return parse_query(raw_query, self.stop_words)
        except InvalidArgumentError as e:
            logger.debug(f"Rejected query {raw_query!r}: {e}")
            raise


def _status_predicate(status: DocumentStatus) -> DocumentPredicate:
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate
