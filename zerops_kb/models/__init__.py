"""Pydantic models for the knowledge base API request/response schemas.

    from zerops_kb.models import SearchRequest, SearchResponse
"""

# ============ HEALTH MODELS ============
from .health import HealthResponse, ReadyResponse

# ============ REQUEST MODELS ============
from .requests import SearchRequest

# ============ SEARCH MODELS ============
from .search import KnowledgeResponse, SearchResponse, SearchResult

__all__ = [
    # Health
    "HealthResponse",
    "ReadyResponse",
    # Requests
    "SearchRequest",
    # Search
    "KnowledgeResponse",
    "SearchResponse",
    "SearchResult",
]
