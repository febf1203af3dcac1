"""Request models (Pydantic) for the knowledge base API."""

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Keyword search request."""

    query: str = Field(
        default="",
        description="Comma or space separated search terms; empty lists every item",
    )
    limit: int | None = Field(
        default=None,
        description="Maximum results (1-20); absent or out-of-range values use the default of 10",
    )
