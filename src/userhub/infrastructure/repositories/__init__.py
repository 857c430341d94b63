"""Repository interfaces."""

from userhub.infrastructure.repositories.user_repository import (
    UserProfile,
    UserRepository,
)

__all__ = ["UserProfile", "UserRepository"]
