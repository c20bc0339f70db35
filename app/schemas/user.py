# app/schemas/user.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class RegisterRequest(BaseModel):
    """
    Payload for account registration.

    Email is matched exactly (case-sensitive) against existing accounts,
    so it is only stripped, never normalized.
    """

    name: str
    email: str
    password: str

    @field_validator("name", "email")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if not v:
            raise ValueError("password cannot be empty")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        return v.strip()


class UserRead(BaseModel):
    """Response schema returned to clients. Never carries password data."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Returned by register and login."""

    token: str
    user: UserRead


class AuthUser(BaseModel):
    """
    Caller identity decoded from the bearer token.
    Injected into protected routes by `require_auth`.
    """

    id: str
    email: str
