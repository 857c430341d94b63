"""Health check response models."""

from pydantic import BaseModel, Field


class DatabaseHealthResponse(BaseModel):
    """Database connectivity check response."""

    status: str = Field(..., description="ok or degraded")
    database: str = Field(..., description="Masked connection URL")
    message: str | None = Field(None, description="Optional status message")
