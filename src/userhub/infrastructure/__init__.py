"""
Infrastructure layer: database access and persistence error classification.
"""

from userhub.infrastructure.database import (
    DatabaseSessionManager,
    close_db,
    get_db_manager,
    init_db,
)
from userhub.infrastructure.db_errors import classify_db_error

__all__ = [
    "DatabaseSessionManager",
    "classify_db_error",
    "close_db",
    "get_db_manager",
    "init_db",
]
