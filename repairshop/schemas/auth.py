"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from repairshop.schemas.base import CamelModel


class LoginRequest(BaseModel):
    """Credentials for login. Emptiness is checked by the credential store."""

    username: str = Field(default="", max_length=255, description="Username")
    password: str = Field(default="", max_length=128, description="Password")


class RegisterRequest(LoginRequest):
    """New account; role defaults to 'user' when omitted."""

    role: str | None = Field(default=None, description="'admin' or 'user'")


class PublicUser(CamelModel):
    """User without the password hash: what services return and clients see."""

    id: int
    username: str
    role: str
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Bearer token plus the authenticated user."""

    token: str = Field(..., description="JWT bearer token, valid for JWT_EXPIRE_HOURS")
    user: PublicUser


class UsersListResponse(BaseModel):
    """Response for GET /auth/users (admin only)."""

    users: list[PublicUser]
