"""
Shared data models used across the application.
"""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok", description="Service status")
    version: str = Field(..., description="Backend version")
    message: str | None = Field(None, description="Optional message")


class ApiResponse(BaseModel, Generic[T]):
    """
    Success response envelope.

    Attributes:
        data: The actual response payload.
        message: Message describing the result.
        timestamp: Time the response was generated (Unix seconds).
    """

    data: T = Field(..., description="Response payload")
    message: str = Field(default="success", description="Result message")
    timestamp: int = Field(..., description="Unix timestamp (seconds)")


def api_ok(data: T, message: str | None = None) -> ApiResponse[T]:
    """
    Wrap a payload into the success envelope.

    Args:
        data: Response payload
        message: Optional message (defaults to "success")

    Returns:
        ApiResponse envelope
    """
    return ApiResponse(
        data=data,
        message=message or "success",
        timestamp=int(datetime.now(UTC).timestamp()),
    )
