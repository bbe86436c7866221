"""
User endpoints.

CRUD over the in‑memory ``UserStore``.  Identifiers arrive as raw path
segments and only their leading integer counts, so ``/api/users/2x`` is
user 2.  A segment without one cannot name a user and is reported as
"User not found" (404) rather than as a validation error.
"""

import re
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from users_api.app.api.deps import get_store
from users_api.app.core.body import read_payload
from users_api.app.schemas.user import (
    ErrorResponse,
    UserCreate,
    UserDeletedResponse,
    UserListResponse,
    UserRead,
    UserResponse,
)
from users_api.app.services.user_store import UserStore

router = APIRouter()

# Leading whitespace, optional sign, ASCII digits; anything after is ignored.
_LEADING_INTEGER_RE = re.compile(r"\s*([+-]?)([0-9]+)", re.ASCII)

# Ids are assigned from small counters; a longer digit run cannot name a user.
MAX_ID_DIGITS = 16

NOT_FOUND = {404: {"model": ErrorResponse}}


def parse_user_id(raw: str) -> Optional[int]:
    """Read the integer prefix of ``raw``, or ``None`` if there is none.

    ``"1abc"`` and ``"1.5"`` both name user 1, while ``"abc"`` names no
    user at all.  Digit runs longer than ``MAX_ID_DIGITS`` (after leading
    zeros) also yield ``None``.
    """
    match = _LEADING_INTEGER_RE.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_ID_DIGITS:
        return None
    value = int(digits)
    return -value if sign == "-" else value


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


def _supplied(payload: Dict[str, Any], field: str) -> Optional[str]:
    value = payload.get(field)
    if isinstance(value, str) and value:
        return value
    return None


@router.api_route("", methods=["GET", "HEAD"], response_model=UserListResponse)
async def list_users(store: UserStore = Depends(get_store)) -> UserListResponse:
    """Return every user in insertion order together with the count."""
    users = store.list_users()
    return UserListResponse(count=len(users), users=[UserRead.model_validate(u) for u in users])


@router.api_route("/{user_id}", methods=["GET", "HEAD"], response_model=UserResponse, responses=NOT_FOUND)
async def get_user(user_id: str, store: UserStore = Depends(get_store)) -> UserResponse:
    parsed = parse_user_id(user_id)
    user = store.find_by_id(parsed) if parsed is not None else None
    if user is None:
        raise _user_not_found()
    return UserResponse(user=UserRead.model_validate(user))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(
    payload: Dict[str, Any] = Depends(read_payload),
    store: UserStore = Depends(get_store),
) -> UserResponse:
    """Create a user from ``name`` and ``email``.

    Both fields are required and must be non-empty strings; the body may
    be JSON or form encoded.
    """
    try:
        data = UserCreate.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name and email are required")
    user = store.create(data.name, data.email)
    return UserResponse(user=UserRead.model_validate(user))


@router.put("/{user_id}", response_model=UserResponse, responses=NOT_FOUND)
async def update_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    store: UserStore = Depends(get_store),
) -> UserResponse:
    """Overwrite ``name`` and/or ``email`` of an existing user.

    Fields that are absent, empty or not strings keep their current
    value.
    """
    parsed = parse_user_id(user_id)
    user = None
    if parsed is not None:
        user = store.update(parsed, name=_supplied(payload, "name"), email=_supplied(payload, "email"))
    if user is None:
        raise _user_not_found()
    return UserResponse(user=UserRead.model_validate(user))


@router.delete("/{user_id}", response_model=UserDeletedResponse, responses=NOT_FOUND)
async def delete_user(user_id: str, store: UserStore = Depends(get_store)) -> UserDeletedResponse:
    """Remove a user and return the removed record."""
    parsed = parse_user_id(user_id)
    user = store.delete(parsed) if parsed is not None else None
    if user is None:
        raise _user_not_found()
    return UserDeletedResponse(user=UserRead.model_validate(user))
