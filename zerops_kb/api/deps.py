"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Access to the document store built at startup
- Search coordinator and lookup service
- Error sanitization
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi import Request as FastAPIRequest

from ..engine import DocumentStore, LookupService, SearchCoordinator

logger = logging.getLogger(__name__)


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Returns a generic message for unexpected errors while preserving
    useful information for known error types.
    """
    error_str = str(error)

    # Known safe error patterns that can be returned to client
    safe_patterns = [
        "Knowledge not found",
        "Knowledge index not loaded",
    ]

    for pattern in safe_patterns:
        if pattern.lower() in error_str.lower():
            return error_str

    logger.error(f"Request error: {error}", exc_info=error)

    return "An internal server error occurred. Please try again."


# ============ ENGINE DEPENDENCIES ============


def get_document_store(request: FastAPIRequest) -> DocumentStore:
    """Return the store built during application startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Knowledge index not loaded")
    return store


def get_search_coordinator(request: FastAPIRequest) -> SearchCoordinator:
    coordinator = getattr(request.app.state, "search", None)
    if coordinator is None:
        raise HTTPException(status_code=503, detail="Knowledge index not loaded")
    return coordinator


def get_lookup_service(request: FastAPIRequest) -> LookupService:
    lookup = getattr(request.app.state, "lookup", None)
    if lookup is None:
        raise HTTPException(status_code=503, detail="Knowledge index not loaded")
    return lookup


DocumentStoreDep = Annotated[DocumentStore, Depends(get_document_store)]
SearchCoordinatorDep = Annotated[SearchCoordinator, Depends(get_search_coordinator)]
LookupServiceDep = Annotated[LookupService, Depends(get_lookup_service)]
