"""Unit test fixtures - small corpora indexed in fresh servers"""

import pytest

from src.search import DocumentStatus, SearchServer

PET_STOP_WORDS = "and in on"

# (id, text, status, ratings) - average ratings: 2, 5, -1, 9
PET_DOCUMENTS = [
    (0, "white cat and fashionable collar", DocumentStatus.ACTIVE, [8, -3]),
    (1, "fluffy cat fluffy tail", DocumentStatus.ACTIVE, [7, 2, 7]),
    (2, "groomed dog expressive eyes", DocumentStatus.ACTIVE, [5, -12, 2, 1]),
    (3, "groomed starling eugene", DocumentStatus.EXCLUDED, [9]),
]


@pytest.fixture
def server():
    """Empty server with no stop words"""
    return SearchServer()


@pytest.fixture
def pet_server():
    """Server with stop words and the four pet documents"""
    server = SearchServer(PET_STOP_WORDS)
    for document_id, text, status, ratings in PET_DOCUMENTS:
        server.add_document(document_id, text, status, ratings)
    return server


@pytest.fixture
def mixed_status_server():
    """Pet documents with one document per status"""
    server = SearchServer(PET_STOP_WORDS)
    statuses = [
        DocumentStatus.ACTIVE,
        DocumentStatus.IRRELEVANT,
        DocumentStatus.EXCLUDED,
        DocumentStatus.REMOVED,
    ]
    for (document_id, text, _, ratings), status in zip(PET_DOCUMENTS, statuses):
        server.add_document(document_id, text, status, ratings)
    return server
