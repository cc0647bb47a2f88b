"""
Document store: per-document rating and lifecycle status.

Documents are created once on insertion and never mutated or deleted.
Insertion order of ids is kept for positional lookup.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Sequence

from .errors import DocumentNotFoundError, InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


class DocumentStatus(Enum):
    """Lifecycle status of an indexed document"""

    ACTIVE = "ACTIVE"
    IRRELEVANT = "IRRELEVANT"
    EXCLUDED = "EXCLUDED"
    REMOVED = "REMOVED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "DocumentStatus":
        """
        Resolve a status by name, case insensitively.

        Legacy names are accepted as aliases: ACTUAL -> ACTIVE, BANNED -> EXCLUDED.

        Raises:
            InvalidArgumentError: if the name matches no status
        """
        key = name.strip().upper()
        key = _LEGACY_STATUS_NAMES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown document status {name!r}. "
                f"Expected one of: {', '.join(status.value for status in cls)}"
            ) from None


_LEGACY_STATUS_NAMES = {
    "ACTUAL": "ACTIVE",
    "BANNED": "EXCLUDED",
}


@dataclass(frozen=True)
class DocumentData:
    """Stored attributes of one document"""

    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """One ranked search result"""

    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance}, rating = {self.rating} }}"


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero.

    Examples:
        >>> compute_average_rating([7, 2, 7])
        5
        >>> compute_average_rating([5, -12, 2, 1])
        -1
        >>> compute_average_rating([])
        0
    """
    if not ratings:
        return 0
    total = sum(ratings)
    # Python's // floors; the sign is restored after dividing magnitudes
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


class DocumentStore:
    """Maps document id to DocumentData, remembering insertion order"""

    def __init__(self):
        self._documents: Dict[int, DocumentData] = {}
        self._document_ids: List[int] = []

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    def check_new_id(self, document_id: int) -> None:
        """
        Fail unless document_id may be inserted.

        Raises:
            InvalidArgumentError: if the id is negative or already stored
        """
        if document_id < 0:
            raise InvalidArgumentError(f"Document id must be non-negative, got {document_id}")
        if document_id in self._documents:
            raise InvalidArgumentError(f"Document id {document_id} already exists")

    def add(self, document_id: int, status: DocumentStatus, ratings: Sequence[int]) -> DocumentData:
        """Store a document; callers validate with check_new_id first"""
        self.check_new_id(document_id)
        data = DocumentData(rating=compute_average_rating(ratings), status=status)
        self._documents[document_id] = data
        self._document_ids.append(document_id)
        return data

    def get(self, document_id: int) -> DocumentData:
        """
        Raises:
            DocumentNotFoundError: if document_id was never added
        """
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(f"Document id {document_id} not found") from None

    def id_at(self, index: int) -> int:
        """
        Document id at a 0-based insertion position.

        Raises:
            OutOfRangeError: if index is negative or >= document count
        """
        if index < 0 or index >= len(self._document_ids):
            raise OutOfRangeError(
                f"Document index {index} out of range [0, {len(self._document_ids)})"
            )
        return self._document_ids[index]
