"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from userhub import __version__
from userhub.config import get_settings
from userhub.core.logging import logger
from userhub.domain.errors import AppError
from userhub.exception_handlers import (
    app_error_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from userhub.lifespan import lifespan
from userhub.middleware import TraceIDMiddleware
from userhub.routes import register_routes


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Must be set BEFORE creating FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )

    # Register exception handlers (ApiError body)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Add middleware
    app.add_middleware(TraceIDMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)

    logger.info(f" FastAPI application created (v{__version__})")
    logger.info(f"CORS origins: {settings.get_allowed_origins()}")

    return app
