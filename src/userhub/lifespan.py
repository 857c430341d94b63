"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from userhub.config import get_settings
from userhub.infrastructure.database import close_db, init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database pool on startup (when ``initialize_database`` is
    set) and disposes it on shutdown.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()
    logger.info(" Starting userhub backend...")
    logger.info(f"Application version: {app.version}")

    if settings.initialize_database:
        manager = init_db(settings)
        await manager.create_schema()
    else:
        logger.info("Database initialization disabled")

    yield

    logger.info(" Shutting down userhub backend...")
    await close_db()
