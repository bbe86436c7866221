"""
Pydantic models for user data.

``UserCreate`` validates the payload of ``POST /api/users``; both
fields must be non-empty strings.  Responses wrap user records in an
envelope carrying a ``success`` flag, mirroring the error envelope
``{"success": false, "error": ...}`` produced by ``core.errors``.
"""

from typing import List

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Alice"])
    email: str = Field(..., min_length=1, examples=["alice@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    # Lets the model be built straight from the store's dataclass records.
    model_config = {
        "from_attributes": True,
    }


class UserResponse(BaseModel):
    success: bool = True
    user: UserRead


class UserListResponse(BaseModel):
    success: bool = True
    count: int
    users: List[UserRead]


class UserDeletedResponse(BaseModel):
    success: bool = True
    message: str = "User deleted"
    user: UserRead


class ErrorResponse(BaseModel):
    """Body of every failing response."""

    success: bool = False
    error: str
