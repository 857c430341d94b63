"""
Database session manager: async connection pool with rollback and error
classification.

Every SQLAlchemy error or driver connection failure (``OSError``, including
the builtin ``TimeoutError``) raised inside ``session()`` is rolled back and
converted exactly once into the application error taxonomy with
``classify_db_error``. Application errors raised inside the block pass
through unchanged.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userhub.domain.errors import AppError, InternalServerError
from userhub.infrastructure.db_errors import classify_db_error
from userhub.infrastructure.schema import metadata

if TYPE_CHECKING:
    from userhub.config import Settings


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        pool_timeout: float = 5.0,
        engine: AsyncEngine | None = None,
    ):
        """
        Initialize the session manager.

        Args:
            database_url: SQLAlchemy async connection URL
            pool_size: Maximum number of pooled connections
            pool_timeout: Seconds to wait for a pooled connection
            engine: Pre-built engine (overrides the other arguments)
        """
        self.engine = engine or create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DatabaseSessionManager":
        """Build a manager from application settings."""
        return cls(
            settings.get_postgres_url(),
            pool_size=settings.postgres_max_connections,
            pool_timeout=settings.postgres_pool_timeout,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session with auto-rollback and error classification."""
        session = self._session_factory()
        try:
            yield session
        except AppError:
            await session.rollback()
            raise
        except (SQLAlchemyError, OSError) as e:
            await session.rollback()
            error = classify_db_error(e)
            logger.debug(f"Database error classified as {error!r}: {e}")
            raise error from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise classify_db_error(e) from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (AppError, OSError) as e:
            logger.error(f"DB health check failed: {e!r}")
            return False

    async def close(self) -> None:
        """Dispose the engine and its connection pool."""
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(settings: "Settings") -> DatabaseSessionManager:
    """Create the process-wide session manager."""
    global db_manager
    db_manager = DatabaseSessionManager.from_settings(settings)
    logger.info(f"Database configured: {settings.get_masked_postgres_url()}")
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """
    Return the process-wide session manager.

    Raises:
        InternalServerError: If the database has not been initialized
    """
    if db_manager is None:
        raise InternalServerError("Database not initialized")
    return db_manager


async def close_db() -> None:
    """Dispose the process-wide session manager, if any."""
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None
