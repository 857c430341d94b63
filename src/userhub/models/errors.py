"""Error response body returned by every failing endpoint."""

from pydantic import BaseModel, Field


class ApiError(BaseModel):
    """
    Error response body.

    Attributes:
        status: HTTP status code corresponding to the error.
        message: Short, human-readable summary (canonical reason phrase).
        detail: Detailed explanation; only present for 4xx responses.
        instance: URI or identifier of the occurrence (omitted by default).
        timestamp: Time the error response was generated (Unix seconds).

    Example:
        ```python
        body = ApiError(
            status=422,
            message="Unprocessable Entity",
            detail="user_name is required",
            timestamp=1750000000,
        )
        ```
    """

    status: int = Field(
        ...,
        description="HTTP status code",
        json_schema_extra={"example": 422},
    )
    message: str = Field(
        ...,
        description="Short, human-readable summary",
        json_schema_extra={"example": "Unprocessable Entity"},
    )
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation (client errors only)",
        json_schema_extra={"example": "user_name is required"},
    )
    instance: str | None = Field(
        default=None,
        description="URI reference identifying this occurrence",
    )
    timestamp: int = Field(
        ...,
        description="Unix timestamp (seconds) of the response",
        json_schema_extra={"example": 1750000000},
    )

    def to_content(self) -> dict:
        """Serialize for a JSON response, omitting absent fields."""
        return self.model_dump(exclude_none=True)
