"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
    UsersListResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
    "UsersListResponse",
]
