"""Health and readiness models."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Server version")
    timestamp: datetime = Field(..., description="Current server time")


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str = Field(..., description="'ready' or 'not_ready'")
    version: str = Field(..., description="Server version")
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual check results")
    knowledge_items: int = Field(default=0, ge=0, description="Number of indexed items")
