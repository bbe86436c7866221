"""
Top‑level router of the API.

This router aggregates the endpoint routers.  The fallback router is
included last so that it only answers requests no other route matches.
"""

from fastapi import APIRouter

from .endpoints import fallback, info, users

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
router.include_router(fallback.router)
