"""Registration, login and admin user listing."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, require_admin
from app.models.user import User
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
    UsersListResponse,
)
from app.services.auth import AuthService

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Register a new user. 409 if the email is taken or the role is unknown."""
    return auth.register(body.email, body.password, body.role)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <accessToken>
    """
    token = auth.login(body.email, body.password)
    return TokenResponse(access_token=token, token_type="bearer")


@router.get("/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> UsersListResponse:
    """List all users (admin only)."""
    users = auth.list_users()
    return UsersListResponse(users=[UserResponse.model_validate(u) for u in users])
