"""
Search Server - FastAPI application over the in-memory TF-IDF index

Endpoints:
- POST /v1/documents: index a document
- GET  /v1/documents: ids in insertion order
- GET  /v1/documents/position/{index}: id at an insertion position
- GET  /v1/documents/{document_id}: stored rating and status
- POST /v1/documents/{document_id}/match: plus words a document matches
- POST /v1/search: top documents for a plus/minus query

The index lives in process memory and is lost on restart.
Handlers are async and never await, so requests are served one at a time
on the event loop and never overlap a write.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Annotated, List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, BeforeValidator, Field

from .config import load_env_files, load_settings
from .logging_config import setup_logging
from .search import (
    DocumentNotFoundError,
    DocumentStatus,
    InvalidArgumentError,
    OutOfRangeError,
    SearchServer,
    SearchServerError,
)

env_file = load_env_files()
settings = load_settings()

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow()

search_server = SearchServer(settings.stop_words)


def get_search_server() -> SearchServer:
    """Dependency returning the process-wide server (overridable in tests)"""
    return search_server


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup"""
    setup_logging(
        log_file=settings.log_file,
        console_level=settings.log_level,
        file_level=logging.DEBUG,  # Always DEBUG in file for troubleshooting
    )
    if env_file:
        logger.info(f"Loaded environment from: {env_file}")
    else:
        logger.warning("No .env.local or .env file found - using system environment variables only")
    logger.info(f"Search server ready: {len(search_server.stop_words)} stop words")

    yield

    logger.info(f"Shutting down with {search_server.get_document_count()} documents indexed")


app = FastAPI(
    title="Search Server API",
    description="In-memory document index with TF-IDF ranked retrieval",
    version=APP_VERSION,
    lifespan=lifespan,
)


def _parse_status(value):
    if isinstance(value, str):
        return DocumentStatus.parse(value)
    return value


# Accepts status names case insensitively, including legacy aliases
StatusField = Annotated[DocumentStatus, BeforeValidator(_parse_status)]


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    document_count: int
    uptime_seconds: float


class AddDocumentRequest(BaseModel):
    document_id: int = Field(..., description="Unique non-negative document id")
    text: str = Field(..., description="Space-separated document words")
    status: StatusField = Field(
        default=DocumentStatus.ACTIVE,
        description="ACTIVE, IRRELEVANT, EXCLUDED or REMOVED (ACTUAL/BANNED accepted)",
    )
    ratings: List[int] = Field(default_factory=list, description="User ratings; averaged on insert")


class AddDocumentResponse(BaseModel):
    document_id: int
    rating: int
    status: DocumentStatus
    message: str


class DocumentInfo(BaseModel):
    document_id: int
    rating: int
    status: DocumentStatus


class DocumentListResponse(BaseModel):
    total: int
    document_ids: List[int]


class DocumentPositionResponse(BaseModel):
    index: int
    document_id: int


class SearchRequest(BaseModel):
    query: str = Field(..., description="Plus/minus query, e.g. 'fluffy cat -collar'")
    status: StatusField = Field(default=DocumentStatus.ACTIVE, description="Only documents with this status")
    min_rating: Optional[int] = Field(default=None, description="Only documents rated at least this")


class SearchResultItem(BaseModel):
    document_id: int
    relevance: float
    rating: int


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultItem]
    total: int


class MatchRequest(BaseModel):
    query: str = Field(..., description="Plus/minus query")


class MatchResponse(BaseModel):
    document_id: int
    words: List[str]
    status: DocumentStatus


# Error mapping
ERROR_STATUS_CODES = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    DocumentNotFoundError: status.HTTP_404_NOT_FOUND,
    OutOfRangeError: status.HTTP_404_NOT_FOUND,
}


@app.exception_handler(SearchServerError)
async def search_server_error_handler(request: Request, exc: SearchServerError):
    """Map search error kinds to HTTP status codes"""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc}")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "detail": str(exc),
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.exception(f"{request.method} {request.url.path} failed")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


# Routes
@app.get("/health", response_model=HealthResponse)
async def health(server: SearchServer = Depends(get_search_server)):
    """Liveness check with index size"""
    uptime = (datetime.utcnow() - APP_START_TIME).total_seconds()
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        document_count=server.get_document_count(),
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/documents", response_model=AddDocumentResponse, status_code=status.HTTP_201_CREATED)
async def add_document(request: AddDocumentRequest, server: SearchServer = Depends(get_search_server)):
    """
    Index a document.

    Fails with 400 if the id is negative or already used, or if the text
    contains control characters. Nothing is indexed on failure.
    """
    server.add_document(request.document_id, request.text, request.status, request.ratings)
    data = server.get_document(request.document_id)
    logger.info(f"Indexed document {request.document_id} ({data.status}, rating={data.rating})")
    return AddDocumentResponse(
        document_id=request.document_id,
        rating=data.rating,
        status=data.status,
        message=f"Document {request.document_id} indexed",
    )


@app.get("/v1/documents", response_model=DocumentListResponse)
async def list_documents(server: SearchServer = Depends(get_search_server)):
    """All document ids in insertion order"""
    document_ids = list(server)
    return DocumentListResponse(total=len(document_ids), document_ids=document_ids)


@app.get("/v1/documents/position/{index}", response_model=DocumentPositionResponse)
async def get_document_id(index: int, server: SearchServer = Depends(get_search_server)):
    """Document id at a 0-based insertion position (404 if out of range)"""
    return DocumentPositionResponse(index=index, document_id=server.get_document_id(index))


@app.get("/v1/documents/{document_id}", response_model=DocumentInfo)
async def get_document(document_id: int, server: SearchServer = Depends(get_search_server)):
    data = server.get_document(document_id)
    return DocumentInfo(document_id=document_id, rating=data.rating, status=data.status)


@app.post("/v1/documents/{document_id}/match", response_model=MatchResponse)
async def match_document(
    document_id: int,
    request: MatchRequest,
    server: SearchServer = Depends(get_search_server),
):
    """
    Plus words of the query found in the document.

    Empty if any minus word is found. 404 for an unknown document,
    400 for a malformed query.
    """
    words, document_status = server.match_document(request.query, document_id)
    return MatchResponse(document_id=document_id, words=list(words), status=document_status)


@app.post("/v1/search", response_model=SearchResponse)
async def search(request: SearchRequest, server: SearchServer = Depends(get_search_server)):
    """
    Top documents for a plus/minus query.

    Filters by status (ACTIVE by default) and optionally by minimum rating.
    """
    if request.min_rating is None:
        documents = server.find_top_documents(request.query, request.status)
    else:
        def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
            return document_status == request.status and rating >= request.min_rating

        documents = server.find_top_documents(request.query, predicate)

    results = [
        SearchResultItem(document_id=document.id, relevance=document.relevance, rating=document.rating)
        for document in documents
    ]
    logger.info(f"Search {request.query!r} ({request.status}): {len(results)} results")
    return SearchResponse(query=request.query, results=results, total=len(results))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,  # Development only
    )
