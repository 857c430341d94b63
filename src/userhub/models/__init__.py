"""
Models package.

Contains shared Pydantic models used across multiple modules.
Module-specific models are located in their respective module directories.
"""

from userhub.models.errors import ApiError
from userhub.models.shared import ApiResponse, HealthResponse, api_ok

__all__ = [
    # Shared
    "ApiResponse",
    "HealthResponse",
    "api_ok",
    # Error body
    "ApiError",
]
