"""Global exception handlers for standardized error responses.

Every failure is rendered as an ``ApiError`` body. Application errors
carry their own status and redaction rules (``AppError.to_response``);
framework errors are rendered with the same body shape.
"""

from datetime import UTC, datetime
from http import HTTPStatus

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from userhub.core.logging import logger
from userhub.domain.errors import AppError, ErrorKind
from userhub.models.errors import ApiError


def _now() -> int:
    return int(datetime.now(UTC).timestamp())


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:  # noqa: ASYNC100
    """Handle AppError with its own status code and redaction rules.

    Note: FastAPI requires exception handlers to be async even if they don't
    perform async operations. This is part of FastAPI's architecture.

    Args:
        request: The FastAPI request object.
        exc: The AppError that was raised.

    Returns:
        JSONResponse with ApiError body.
    """
    status_code, body = exc.to_response()
    return JSONResponse(status_code=status_code, content=body.to_content())


async def http_exception_handler(  # noqa: ASYNC100
    request: Request, exc: HTTPException
) -> JSONResponse:
    """Handle framework HTTPException (e.g. unknown route) with ApiError body.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ApiError body.
    """
    is_server_error = exc.status_code >= 500
    bound = logger.bind(path=str(request.url.path), method=request.method)
    log = bound.error if is_server_error else bound.warning
    log(f"HTTPException: {exc.status_code} - {exc.detail}")

    body = ApiError(
        status=exc.status_code,
        message=_reason(exc.status_code),
        detail=None if is_server_error or exc.detail is None else str(exc.detail),
        timestamp=_now(),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.to_content(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 422 Unprocessable Entity.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ApiError body summarizing the invalid fields.
    """
    errors = exc.errors()
    logger.bind(path=str(request.url.path), method=request.method).warning(
        f"Validation error: {len(errors)} errors"
    )

    fields = ", ".join(
        ".".join(str(loc) for loc in error["loc"] if loc != "body") or "body"
        for error in errors
    )
    detail = f"Invalid request ({fields})" if fields else "Invalid request"

    kind = ErrorKind.UNPROCESSABLE_CONTENT
    body = ApiError(
        status=kind.status_code,
        message=kind.reason,
        detail=detail,
        timestamp=_now(),
    )
    return JSONResponse(status_code=kind.status_code, content=body.to_content())


async def general_exception_handler(  # noqa: ASYNC100
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions with 500 Internal Server Error.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ApiError body (no detail).
    """
    logger.bind(path=str(request.url.path), method=request.method).opt(
        exception=exc
    ).error(f"Unexpected error: {type(exc).__name__}")

    kind = ErrorKind.INTERNAL_SERVER_ERROR
    body = ApiError(status=kind.status_code, message=kind.reason, timestamp=_now())
    return JSONResponse(status_code=kind.status_code, content=body.to_content())
