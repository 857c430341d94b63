"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

API_V1_PREFIX: str = ""

# Module-specific prefixes
USERS_PREFIX: str = f"{API_V1_PREFIX}/users"

__all__ = [
    "API_V1_PREFIX",
    "USERS_PREFIX",
]
