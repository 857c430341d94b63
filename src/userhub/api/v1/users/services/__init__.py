"""
Profile service.

Turns raw profile input into normalized domain values and loads stored
profiles. Validation errors raised by the value objects propagate
unchanged to the transport boundary.
"""

from datetime import date

from userhub.api.v1.users.request import ProfileRequest
from userhub.api.v1.users.response import ProfileResponse
from userhub.core.logging import logger
from userhub.domain.errors import InternalServerError
from userhub.domain.value_objects import BirthDate, NormalizedText, UserId
from userhub.infrastructure.repositories import UserProfile, UserRepository

USER_NAME_MIN_LENGTH = 3
USER_NAME_MAX_LENGTH = 64
NAME_MAX_LENGTH = 64
EMAIL_MAX_LENGTH = 254
PHONE_MAX_LENGTH = 16


def _optional_text(raw: str | None, label: str, max_len: int) -> str | None:
    if raw is None:
        return None
    text = NormalizedText.parse(raw, required=False, label=label, max_len=max_len)
    return text.value if text else None


class ProfileService:
    """Business logic for user profile validation and lookup."""

    def __init__(self, repository: UserRepository | None = None):
        """
        Initialize profile service.

        Args:
            repository: User repository (only needed for lookups)
        """
        self.repository = repository

    def validate_profile(
        self, request: ProfileRequest, today: date | None = None
    ) -> ProfileResponse:
        """
        Normalize and validate a submitted profile.

        Args:
            request: Raw profile fields
            today: Reference date (defaults to the local date)

        Returns:
            Normalized profile with computed age

        Raises:
            UnprocessableContentError: If any present field is invalid
        """
        if today is None:
            today = date.today()

        user_name = NormalizedText.parse(
            request.user_name,
            required=True,
            label="user_name",
            min_len=USER_NAME_MIN_LENGTH,
            max_len=USER_NAME_MAX_LENGTH,
        )
        birth_date = (
            BirthDate.parse(request.birth_date, required=False, today=today)
            if request.birth_date is not None
            else None
        )

        response = ProfileResponse(
            user_name=user_name.value,
            first_name=_optional_text(request.first_name, "first_name", NAME_MAX_LENGTH),
            last_name=_optional_text(request.last_name, "last_name", NAME_MAX_LENGTH),
            email=_optional_text(request.email, "email", EMAIL_MAX_LENGTH),
            phone=_optional_text(request.phone, "phone", PHONE_MAX_LENGTH),
            birth_date=birth_date.value if birth_date else None,
            age=birth_date.age_in_years(today) if birth_date else None,
        )
        logger.debug(f"Profile validated for user_name={response.user_name!r}")
        return response

    async def get_profile(
        self, user_id: int, today: date | None = None
    ) -> ProfileResponse:
        """
        Load a stored profile.

        Args:
            user_id: Raw user ID
            today: Reference date for the age (defaults to the local date)

        Returns:
            Stored profile with computed age

        Raises:
            InternalServerError: If user_id is not positive or no repository is set
            NotFoundError: If the user does not exist
        """
        uid = UserId(user_id)
        if self.repository is None:
            raise InternalServerError("ProfileService has no repository")

        profile = await self.repository.get_profile(uid)
        return self._to_response(profile, today or date.today())

    @staticmethod
    def _to_response(profile: UserProfile, today: date) -> ProfileResponse:
        birth_date = profile.birth_date
        return ProfileResponse(
            user_id=int(profile.user_id),
            public_id=profile.public_id,
            user_name=profile.user_name,
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            phone=profile.phone,
            birth_date=birth_date.value if birth_date else None,
            age=birth_date.age_in_years(today) if birth_date else None,
        )
