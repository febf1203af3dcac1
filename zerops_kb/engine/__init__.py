"""Knowledge engine: document store, scoring and search.

This package contains:
- core: document structures, identifier derivation, query parsing
- scoring: the keyword relevance scorer
- store: the in-memory document store and its startup build
- search: the search coordinator and lookup service
"""

from .errors import (
    DocumentParseError,
    KnowledgeBaseError,
    KnowledgeNotFoundError,
    StoreFrozenError,
)
from .search import (
    LookupService,
    SearchCoordinator,
    extract_tags,
    summarize,
    to_search_result,
)
from .store import DirectorySource, DocumentStore, KnowledgeSource, build_store

__all__ = [
    # Errors
    "KnowledgeBaseError",
    "KnowledgeNotFoundError",
    "DocumentParseError",
    "StoreFrozenError",
    # Store
    "KnowledgeSource",
    "DirectorySource",
    "DocumentStore",
    "build_store",
    # Search
    "SearchCoordinator",
    "LookupService",
    "extract_tags",
    "summarize",
    "to_search_result",
]
