"""PostgreSQL repository implementations."""

from userhub.infrastructure.implementations.postgres.user_repository import (
    PostgresUserRepository,
)

__all__ = ["PostgresUserRepository"]
