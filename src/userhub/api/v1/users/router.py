"""User Profile API Routes - Route registration only."""

from fastapi import APIRouter

from userhub.api.v1 import USERS_PREFIX
from userhub.api.v1.users import api

router = APIRouter()
router.include_router(api.router, prefix=USERS_PREFIX, tags=["users"])
