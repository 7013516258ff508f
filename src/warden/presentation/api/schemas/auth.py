"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field

from warden.domain.user import UserRole
from warden.presentation.api.schemas.common import CamelModel


class SignupRequest(CamelModel):
    """Request schema for account registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (at least 6 characters)")
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole | None = Field(default=None, description="Defaults to USER")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "abcdef",
                "name": "Ada",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "user@example.com", "password": "abcdef"},
        },
    )


class LoginUser(CamelModel):
    id: UUID
    name: str
    role: UserRole


class LoginResponse(CamelModel):
    """Bearer token plus a summary of the logged-in user."""

    token: str
    user: LoginUser
