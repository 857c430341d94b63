"""
Abstract interface for user profile storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from userhub.domain.value_objects import BirthDate, UserId


@dataclass(frozen=True)
class UserProfile:
    """
    User profile as stored.

    Attributes:
        user_id: Primary key
        public_id: Public (externally visible) identifier
        user_name: Unique user name
        first_name: Given name (optional)
        last_name: Family name (optional)
        email: E-mail address (optional)
        phone: Phone number (optional)
        birth_date: Birth date (optional)
    """

    user_id: UserId
    public_id: str
    user_name: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    birth_date: BirthDate | None = None


class UserRepository(ABC):
    """Abstract interface for user profile lookups."""

    @abstractmethod
    async def get_profile(self, user_id: UserId) -> UserProfile:
        """
        Retrieve a user profile by ID.

        Args:
            user_id: User identifier

        Returns:
            Stored profile

        Raises:
            NotFoundError: If no user has this ID
        """
        pass
