"""
Ranking policy for scored documents.

Order:
    1. Relevance, descending
    2. When relevances differ by less than RELEVANCE_TOLERANCE: rating, descending
    3. Remaining ties keep the scorer's order

Then truncate to MAX_RESULT_DOCUMENT_COUNT.
"""

import functools
from typing import List

from .document_store import Document

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_TOLERANCE = 1e-6


def compare_documents(lhs: Document, rhs: Document) -> int:
    """Negative if lhs ranks before rhs, positive if after, 0 if tied"""
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_TOLERANCE:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def rank_documents(documents: List[Document]) -> List[Document]:
    """
    Sort by the ranking policy and keep the top results.

    Example:
        >>> ranked = rank_documents([
        ...     Document(id=0, relevance=0.1, rating=9),
        ...     Document(id=1, relevance=0.3, rating=1),
        ...     Document(id=2, relevance=0.1 + 1e-9, rating=2),
        ... ])
        >>> [document.id for document in ranked]
        [1, 0, 2]
    """
    ranked = sorted(documents, key=functools.cmp_to_key(compare_documents))
    return ranked[:MAX_RESULT_DOCUMENT_COUNT]
