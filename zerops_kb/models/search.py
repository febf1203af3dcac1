"""Search and lookup response models for the knowledge base API."""

from typing import Any

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A ranked knowledge item returned by search."""

    id: str = Field(..., description="Semantic ID like 'service/nodejs'")
    name: str = Field(..., description="Display name in Title Case")
    summary: str = Field(default="", description="Description truncated to 200 characters")
    type: str = Field(..., description="Item type: service, recipe, patterns, runtimes, nginx")
    tags: list[str] = Field(default_factory=list, description="Deduplicated item tags")
    score: float = Field(..., ge=0.0, description="Relevance score (higher is better)")


class SearchResponse(BaseModel):
    """Response of the search endpoint."""

    query: str = Field(..., description="The query as submitted")
    results: list[SearchResult] = Field(default_factory=list, description="Ranked results")
    count: int = Field(..., ge=0, description="Number of results returned")


class KnowledgeResponse(BaseModel):
    """A full knowledge item returned by lookup."""

    id: str = Field(..., description="Semantic ID")
    name: str = Field(..., description="Kebab-case item name")
    type: str = Field(..., description="Item type")
    content: Any = Field(..., description="Full JSON content of the item")
