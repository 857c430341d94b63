"""Unit tests for DatabaseSessionManager."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import exc as sa_exc

from userhub.config import Settings
from userhub.domain.errors import (
    ConflictError,
    InternalServerError,
    NotFoundError,
    RequestTimeoutError,
)
from userhub.infrastructure import database
from userhub.infrastructure.database import DatabaseSessionManager


@pytest.fixture
def manager():
    """Session manager with a mocked engine and session factory."""
    mgr = DatabaseSessionManager("postgresql+asyncpg://u:p@h/db", engine=MagicMock())
    session = AsyncMock()
    mgr._session_factory = MagicMock(return_value=session)
    return mgr, session


@pytest.mark.asyncio
async def test_session_closes_on_success(manager):
    """A successful block closes the session without rollback."""
    mgr, session = manager

    async with mgr.session() as db:
        assert db is session

    session.rollback.assert_not_awaited()
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_classifies_sqlalchemy_errors(manager):
    """SQLAlchemy errors are rolled back and classified once."""
    mgr, session = manager
    driver_error = Exception("duplicate key")
    driver_error.sqlstate = "23505"
    cause = sa_exc.IntegrityError("INSERT", {}, driver_error)

    with pytest.raises(ConflictError) as exc_info:
        async with mgr.session():
            raise cause

    assert exc_info.value.__cause__ is cause
    session.rollback.assert_awaited_once()
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_passes_app_errors_through(manager):
    """Application errors raised inside the block are not re-classified."""
    mgr, session = manager
    original = NotFoundError("user not found")

    with pytest.raises(NotFoundError) as exc_info:
        async with mgr.session():
            raise original

    assert exc_info.value is original
    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_maps_missing_row(manager):
    """NoResultFound inside a session becomes NotFoundError."""
    mgr, _ = manager

    with pytest.raises(NotFoundError):
        async with mgr.session():
            raise sa_exc.NoResultFound("No row was found")


@pytest.mark.asyncio
async def test_session_maps_driver_connect_timeout(manager):
    """An unwrapped driver TimeoutError becomes RequestTimeoutError."""
    mgr, session = manager
    session.execute.side_effect = TimeoutError()

    with pytest.raises(RequestTimeoutError) as exc_info:
        async with mgr.session() as db:
            await db.execute("SELECT 1")

    assert isinstance(exc_info.value.__cause__, TimeoutError)
    session.rollback.assert_awaited_once()
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_maps_connection_refused(manager):
    """Socket errors from the driver become InternalServerError."""
    mgr, session = manager
    session.execute.side_effect = ConnectionRefusedError()

    with pytest.raises(InternalServerError):
        async with mgr.session() as db:
            await db.execute("SELECT 1")


@pytest.mark.asyncio
async def test_health_check_ok(manager):
    """Health check succeeds when SELECT 1 runs."""
    mgr, session = manager

    assert await mgr.health_check() is True
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_health_check_failure(manager):
    """Health check reports False when the database errors."""
    mgr, session = manager
    session.execute.side_effect = sa_exc.OperationalError(
        "SELECT 1", {}, Exception("connection refused")
    )

    assert await mgr.health_check() is False


@pytest.mark.asyncio
async def test_health_check_connection_refused(manager):
    """Raw socket errors from the driver also report False."""
    mgr, session = manager
    session.execute.side_effect = ConnectionRefusedError()

    assert await mgr.health_check() is False


def test_get_db_manager_requires_init():
    """Using the database before startup is an internal error."""
    with patch.object(database, "db_manager", None):
        with pytest.raises(InternalServerError, match="not initialized"):
            database.get_db_manager()


@pytest.mark.asyncio
async def test_init_and_close_db():
    """init_db builds the singleton from settings; close_db disposes it."""
    settings = Settings(postgres_max_connections=3, postgres_pool_timeout=1.5)

    with patch.object(database, "create_async_engine") as mock_create:
        mock_create.return_value.dispose = AsyncMock()
        mgr = database.init_db(settings)

        assert database.get_db_manager() is mgr
        _, kwargs = mock_create.call_args
        assert kwargs["pool_size"] == 3
        assert kwargs["pool_timeout"] == 1.5

        await database.close_db()

    mock_create.return_value.dispose.assert_awaited_once()
    assert database.db_manager is None
