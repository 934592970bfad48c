"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class RegisterRequest(BaseModel):
    """New account details. role is checked by the service, not here."""

    email: EmailStr = Field(..., description="User email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="User password",
    )
    role: str = Field(..., description="User role [admin|user]")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="User email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="User password",
    )


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(
        ...,
        validation_alias=AliasChoices("access_token", "accessToken"),
        serialization_alias="accessToken",
        description="JWT access token",
    )
    token_type: str = Field(
        default="bearer",
        validation_alias=AliasChoices("token_type", "tokenType"),
        serialization_alias="tokenType",
        description="Token type",
    )


class UserResponse(BaseModel):
    """Registered user as returned to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: str
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )


class CurrentUser(BaseModel):
    """Authenticated caller (id, email, role) taken from the bearer token."""

    id: int
    email: str
    role: str


class UsersListResponse(BaseModel):
    """Response for GET /auth/users (admin only)."""

    users: list[UserResponse]
