"""
Main FastAPI application entry point.

This module creates the FastAPI application using the application factory
pattern for clean separation of concerns.
"""

from userhub.app_setup import add_root_endpoint
from userhub.application import create_app
from userhub.config import get_settings
from userhub.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

# Create FastAPI application using factory
app = create_app()

# Add root endpoint
add_root_endpoint(app)


def run() -> None:
    """Run the development server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "userhub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )


if __name__ == "__main__":
    run()
