"""
Application error taxonomy.

Every fallible operation in the service fails with one of the nine
``AppError`` kinds below. Each kind maps to exactly one HTTP status code,
and the error travels unchanged up to the transport boundary, where
``AppError.to_response()`` renders it once.

Redaction rule:
- 4xx: the response carries the canonical reason phrase and the detail.
- 5xx: the response carries the canonical reason phrase only; the detail
  is written to the log and never returned to the client.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar

from loguru import logger

from userhub.models.errors import ApiError


class ErrorKind(str, Enum):
    """Closed set of error kinds with their status code and reason phrase."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    REQUEST_TIMEOUT = "request_timeout"
    CONFLICT = "conflict"
    TEAPOT = "teapot"
    UNPROCESSABLE_CONTENT = "unprocessable_content"
    INTERNAL_SERVER_ERROR = "internal_server_error"

    @property
    def status_code(self) -> int:
        return _STATUS_TABLE[self][0]

    @property
    def reason(self) -> str:
        return _STATUS_TABLE[self][1]


_STATUS_TABLE: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.BAD_REQUEST: (400, "Bad Request"),
    ErrorKind.UNAUTHORIZED: (401, "Unauthorized"),
    ErrorKind.FORBIDDEN: (403, "Forbidden"),
    ErrorKind.NOT_FOUND: (404, "Not Found"),
    ErrorKind.REQUEST_TIMEOUT: (408, "Request Timeout"),
    ErrorKind.CONFLICT: (409, "Conflict"),
    ErrorKind.TEAPOT: (418, "I'm a teapot"),
    ErrorKind.UNPROCESSABLE_CONTENT: (422, "Unprocessable Entity"),
    ErrorKind.INTERNAL_SERVER_ERROR: (500, "Internal Server Error"),
}


class AppError(Exception):
    """
    Base class for all application errors.

    Subclasses pin ``kind``; instances carry an optional human-readable
    detail. Use the concrete subclasses rather than this class directly.

    Attributes:
        kind: Error kind (fixed per subclass)
        detail: Optional detail message
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.kind.reason)
        self.detail = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppError):
            return NotImplemented
        return self.kind is other.kind and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))

    @property
    def status_code(self) -> int:
        """HTTP status code for this error."""
        return self.kind.status_code

    @property
    def is_server_error(self) -> bool:
        """True for 5xx kinds."""
        return 500 <= self.status_code < 600

    def to_body(self) -> ApiError:
        """
        Build the outward-facing error body.

        Server errors never expose their detail.

        Returns:
            ApiError body for this error
        """
        return ApiError(
            status=self.status_code,
            message=self.kind.reason,
            detail=None if self.is_server_error else self.detail,
            instance=None,
            timestamp=int(datetime.now(UTC).timestamp()),
        )

    def to_response(self) -> tuple[int, ApiError]:
        """
        Convert this error into a status code and response body.

        Logs the full error (including any detail) before redaction:
        5xx at ERROR level, 4xx at WARNING level.

        Returns:
            Tuple of (status code, ApiError body)
        """
        bound = logger.bind(
            error_kind=self.kind.value,
            status_code=self.status_code,
            detail=self.detail,
        )
        if self.is_server_error:
            bound.error(f"internal server error: {self!r}")
        else:
            bound.warning(f"client error: {self!r}")

        return self.status_code, self.to_body()


class BadRequestError(AppError):
    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND


class RequestTimeoutError(AppError):
    kind = ErrorKind.REQUEST_TIMEOUT


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT


class TeapotError(AppError):
    kind = ErrorKind.TEAPOT


class UnprocessableContentError(AppError):
    """Validation failure of user-supplied content."""

    kind = ErrorKind.UNPROCESSABLE_CONTENT


class InternalServerError(AppError):
    """Internal failure; detail is logged, never returned."""

    kind = ErrorKind.INTERNAL_SERVER_ERROR


__all__ = [
    "AppError",
    "BadRequestError",
    "ConflictError",
    "ErrorKind",
    "ForbiddenError",
    "InternalServerError",
    "NotFoundError",
    "RequestTimeoutError",
    "TeapotError",
    "UnauthorizedError",
    "UnprocessableContentError",
]
