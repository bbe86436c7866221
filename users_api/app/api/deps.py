"""Shared FastAPI dependencies."""

from fastapi import Request

from users_api.app.services.user_store import UserStore


def get_store(request: Request) -> UserStore:
    """Return the store owned by the application serving ``request``."""
    return request.app.state.store
