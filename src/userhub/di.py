"""
Dependency injection container for the userhub backend.

This module provides centralized dependency injection using FastAPI's Depends
with typing.Annotated for clean type hints throughout the application.
"""

from typing import Annotated

from fastapi import Depends

from userhub.api.v1.users.services import ProfileService
from userhub.config import Settings, get_settings
from userhub.infrastructure.database import DatabaseSessionManager, get_db_manager
from userhub.infrastructure.implementations.postgres import PostgresUserRepository
from userhub.infrastructure.repositories import UserRepository

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Database Dependencies
# ============================================================================

DatabaseDep = Annotated[DatabaseSessionManager, Depends(get_db_manager)]
"""Injected process-wide DatabaseSessionManager."""


def get_user_repository(db: DatabaseDep) -> UserRepository:
    """
    Get the user repository.

    Args:
        db: Database session manager (injected)

    Returns:
        PostgreSQL-backed user repository
    """
    return PostgresUserRepository(db)


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
"""Injected UserRepository instance."""


# ============================================================================
# Service Dependencies
# ============================================================================


def get_profile_service(repository: UserRepositoryDep) -> ProfileService:
    """
    Get the profile service.

    Args:
        repository: User repository (injected)

    Returns:
        Profile service bound to the repository
    """
    return ProfileService(repository)


ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
"""Injected ProfileService instance."""
