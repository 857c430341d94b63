"""
User profile API endpoints.

Errors raised by the value objects or the repository are AppError
instances and are rendered by the global exception handler.
"""

from fastapi import APIRouter, status

from userhub.api.v1.users.request import ProfileRequest
from userhub.api.v1.users.response import ProfileResponse
from userhub.api.v1.users.services import ProfileService
from userhub.di import ProfileServiceDep
from userhub.domain.errors import ErrorKind
from userhub.models.errors import ApiError
from userhub.models.shared import ApiResponse, api_ok

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict] = {
    kind.status_code: {"model": ApiError}
    for kind in (
        ErrorKind.NOT_FOUND,
        ErrorKind.UNPROCESSABLE_CONTENT,
        ErrorKind.INTERNAL_SERVER_ERROR,
    )
}


@router.post(
    "/profile/validate",
    response_model=ApiResponse[ProfileResponse],
    status_code=status.HTTP_200_OK,
    summary="Validate and normalize a profile",
    description="""
    Normalize submitted profile fields without storing them.

    Every text field is NFKC-normalized and trimmed; lengths are counted in
    user-perceived characters. `birth_date` must be `YYYYMMDD` and not in
    the future. Blank optional fields are returned as `null`.
    """,
    responses=ERROR_RESPONSES,
)
async def validate_profile(request: ProfileRequest) -> ApiResponse[ProfileResponse]:
    """
    Validate a profile.

    Args:
        request: Raw profile fields

    Returns:
        Normalized profile with computed age

    Raises:
        UnprocessableContentError: If any present field is invalid (422)
    """
    profile = ProfileService().validate_profile(request)
    return api_ok(profile)


@router.get(
    "/{user_id}",
    response_model=ApiResponse[ProfileResponse],
    status_code=status.HTTP_200_OK,
    summary="Get a user profile",
    responses=ERROR_RESPONSES,
)
async def get_profile(
    user_id: int,
    service: ProfileServiceDep,
) -> ApiResponse[ProfileResponse]:
    """
    Get a stored user profile.

    Args:
        user_id: User ID
        service: Profile service (injected)

    Returns:
        Stored profile with computed age

    Raises:
        NotFoundError: If the user does not exist (404)
        InternalServerError: If user_id is not a positive integer (500)
    """
    profile = await service.get_profile(user_id)
    return api_ok(profile)
