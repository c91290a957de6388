"""
Pydantic models for user data.

Defines schemas for registering users, logging in and reading user
information.  The stored ``User`` keeps only a salted password hash;
``UserRead`` is what the API returns and never contains it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import utcnow


DEFAULT_ROLE = "user"


class UserInput(BaseModel):
    """Schema for registering or updating a user.

    On registration ``password`` is required.  On update it is only
    re-hashed when present, and ``role`` only changes when present.
    """

    username: str = Field(..., min_length=1, examples=["testuser"])
    email: str = Field(..., min_length=1, examples=["test@example.com"])
    password: Optional[str] = Field(None, examples=["password123"])
    role: Optional[str] = Field(None, examples=["user"])


class User(BaseModel):
    """Stored user record."""

    id: str
    username: str
    email: str
    password_hash: str = Field(..., exclude=True, repr=False)
    role: str = DEFAULT_ROLE
    created_at: datetime
    updated_at: datetime


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class LoginRequest(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


def new_user(user_id: str, data: UserInput, password_hash: str) -> User:
    """Build a user; an absent or empty role becomes ``"user"``."""
    now = utcnow()
    return User(
        id=user_id,
        username=data.username,
        email=data.email,
        password_hash=password_hash,
        role=data.role or DEFAULT_ROLE,
        created_at=now,
        updated_at=now,
    )


def update_user(original: User, data: UserInput, password_hash: Optional[str] = None) -> User:
    """Apply ``data`` to ``original``.

    Username and email are always replaced.  Role and password hash are
    replaced only when given.
    """
    return original.model_copy(
        update={
            "username": data.username,
            "email": data.email,
            "role": data.role or original.role,
            "password_hash": password_hash or original.password_hash,
            "updated_at": utcnow(),
        }
    )


def to_read(user: User) -> UserRead:
    return UserRead.model_validate(user)
