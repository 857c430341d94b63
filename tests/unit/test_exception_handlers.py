"""
Unit tests for exception handlers.

Tests error response formatting, status code mapping and redaction.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from userhub.domain.errors import (
    ConflictError,
    InternalServerError,
    UnprocessableContentError,
)
from userhub.exception_handlers import (
    app_error_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.method = "GET"
    request.url.path = "/test"
    return request


def body_of(response) -> dict:
    return json.loads(response.body)


# ===========================
# AppError Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_app_error_handler_client_error(request_mock):
    """Client errors carry their reason phrase and detail."""
    exc = UnprocessableContentError("user_name is required")

    response = await app_error_handler(request_mock, exc)

    assert response.status_code == 422
    body = body_of(response)
    assert body["status"] == 422
    assert body["message"] == "Unprocessable Entity"
    assert body["detail"] == "user_name is required"
    assert isinstance(body["timestamp"], int)
    assert "instance" not in body


@pytest.mark.asyncio
async def test_app_error_handler_conflict(request_mock):
    """Conflict maps to 409."""
    response = await app_error_handler(request_mock, ConflictError("taken"))

    assert response.status_code == 409
    assert body_of(response)["message"] == "Conflict"


@pytest.mark.asyncio
async def test_app_error_handler_redacts_server_detail(request_mock):
    """Server errors never expose their detail."""
    exc = InternalServerError("DB error [42P01]: relation missing")

    response = await app_error_handler(request_mock, exc)

    assert response.status_code == 500
    body = body_of(response)
    assert body["message"] == "Internal Server Error"
    assert "detail" not in body
    assert "relation missing" not in response.body.decode()


# ===========================
# HTTP Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_http_exception_handler_404(request_mock):
    """Test HTTP exception handler with 404 not found."""
    exc = HTTPException(status_code=404, detail="Not Found")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 404
    body = body_of(response)
    assert body["status"] == 404
    assert body["message"] == "Not Found"


@pytest.mark.asyncio
async def test_http_exception_handler_405(request_mock):
    """Method not allowed uses the standard phrase."""
    exc = HTTPException(status_code=405, detail="Method Not Allowed")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 405
    assert body_of(response)["message"] == "Method Not Allowed"


@pytest.mark.asyncio
async def test_http_exception_handler_500_hides_detail(request_mock):
    """Framework 5xx errors are redacted as well."""
    exc = HTTPException(status_code=503, detail="upstream pool exhausted")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 503
    body = body_of(response)
    assert body["message"] == "Service Unavailable"
    assert "detail" not in body


@pytest.mark.asyncio
async def test_http_exception_handler_keeps_headers(request_mock):
    """Headers set on the exception are preserved."""
    exc = HTTPException(
        status_code=401, detail="Auth required", headers={"WWW-Authenticate": "Bearer"}
    )

    response = await http_exception_handler(request_mock, exc)

    assert response.headers["WWW-Authenticate"] == "Bearer"


# ===========================
# Validation Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_validation_exception_handler_lists_fields(request_mock):
    """Test validation handler summarizes invalid fields."""
    exc = RequestValidationError(
        [
            {"loc": ("body", "user_name"), "msg": "Field required", "type": "missing"},
            {"loc": ("path", "user_id"), "msg": "not int", "type": "int_parsing"},
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 422
    body = body_of(response)
    assert body["message"] == "Unprocessable Entity"
    assert body["detail"] == "Invalid request (user_name, path.user_id)"


@pytest.mark.asyncio
async def test_validation_exception_handler_whole_body(request_mock):
    """A missing body is reported as 'body'."""
    exc = RequestValidationError(
        [{"loc": ("body",), "msg": "Field required", "type": "missing"}]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert body_of(response)["detail"] == "Invalid request (body)"


# ===========================
# General Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_general_exception_handler(request_mock, log_records):
    """Unexpected errors become 500 without detail and are logged."""
    exc = RuntimeError("secret internals")

    response = await general_exception_handler(request_mock, exc)

    assert response.status_code == 500
    body = body_of(response)
    assert body["message"] == "Internal Server Error"
    assert "detail" not in body
    assert "secret internals" not in response.body.decode()
    assert any(
        r["level"].name == "ERROR" and "RuntimeError" in r["message"]
        for r in log_records
    )
