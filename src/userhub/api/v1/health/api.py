"""
Health check endpoints.

Provides health check endpoints for monitoring service status.
"""

from fastapi import APIRouter

from userhub import __version__
from userhub.api.v1.health.models import DatabaseHealthResponse
from userhub.di import SettingsDep
from userhub.infrastructure import database
from userhub.models.shared import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status and version
    """
    return HealthResponse(
        status="ok", version=__version__, message="Service is healthy"
    )


@router.get("/health/db", response_model=DatabaseHealthResponse)
async def database_health_check(settings: SettingsDep) -> DatabaseHealthResponse:
    """
    Database connectivity check.

    Always answers 200; ``status`` is ``degraded`` when the database is
    not configured or not reachable.

    Returns:
        Database status and masked connection URL
    """
    masked_url = settings.get_masked_postgres_url()
    manager = database.db_manager
    if manager is None:
        return DatabaseHealthResponse(
            status="degraded", database=masked_url, message="Database not initialized"
        )

    if await manager.health_check():
        return DatabaseHealthResponse(status="ok", database=masked_url)
    return DatabaseHealthResponse(
        status="degraded", database=masked_url, message="Database unreachable"
    )
