"""Engine core module.

This module contains core utilities and data structures for the knowledge engine:
- Document data structures and identifier derivation
- Query tokenization and page size normalization
"""

from .document import (
    RECIPE_PREFIX,
    RECIPE_TYPE,
    ContentView,
    KnowledgeDocument,
    derive_identity,
    format_name,
    parse_document,
)
from .query import (
    DEFAULT_SEARCH_LIMIT,
    MAX_SEARCH_LIMIT,
    clamp_limit,
    parse_query,
)

__all__ = [
    # Document structures
    "ContentView",
    "KnowledgeDocument",
    "RECIPE_PREFIX",
    "RECIPE_TYPE",
    "derive_identity",
    "format_name",
    "parse_document",
    # Query utilities
    "parse_query",
    "clamp_limit",
    "DEFAULT_SEARCH_LIMIT",
    "MAX_SEARCH_LIMIT",
]
