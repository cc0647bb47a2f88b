"""
In-memory document search with TF-IDF ranking.

Components:
- tokenizer: space splitting and control-character validation
- stop_words: immutable stop-word set
- document_store: ratings, statuses and insertion order
- inverted_index: term -> {document id: normalized term frequency}
- query_parser: plus/minus query syntax
- scorer: TF-IDF relevance with predicate filtering and minus-word exclusion
- ranking: relevance/rating ordering and top-K truncation
- server: SearchServer facade tying it all together
"""

from .document_store import Document, DocumentData, DocumentStatus
from .errors import (
    DocumentNotFoundError,
    InvalidArgumentError,
    OutOfRangeError,
    SearchServerError,
)
from .query_parser import Query, parse_query
from .ranking import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_TOLERANCE
from .server import MatchResult, SearchServer
from .stop_words import StopWords

__all__ = [
    "Document",
    "DocumentData",
    "DocumentStatus",
    "DocumentNotFoundError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "SearchServerError",
    "Query",
    "parse_query",
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_TOLERANCE",
    "MatchResult",
    "SearchServer",
    "StopWords",
]
