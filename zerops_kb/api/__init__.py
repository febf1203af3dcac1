"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import (
    SearchCoordinatorDep,
    LookupServiceDep,
    DocumentStoreDep,
    get_document_store,
    get_lookup_service,
    get_search_coordinator,
    sanitize_error_message,
)

__all__ = [
    "get_document_store",
    "get_search_coordinator",
    "get_lookup_service",
    "sanitize_error_message",
    "DocumentStoreDep",
    "SearchCoordinatorDep",
    "LookupServiceDep",
]
