"""Request dependencies: service factories and bearer-token access control."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.roles import ROLE_ADMIN
from app.repositories.products import ProductRepository
from app.repositories.users import UserRepository
from app.schemas.auth import CurrentUser
from app.services.auth import AuthService, check_role
from app.services.products import ProductService

security = HTTPBearer(auto_error=False)


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    return AuthService(UserRepository(db))


def get_product_service(db: Annotated[Session, Depends(get_db)]) -> ProductService:
    return ProductService(ProductRepository(db))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the caller. Raises 401 if missing or invalid."""
    token = credentials.credentials if credentials is not None else None
    claims = AuthService.authenticate_token(token)
    return CurrentUser(id=claims.user_id, email=claims.email, role=claims.role)


def require_role(role: str) -> Callable[[CurrentUser], CurrentUser]:
    """Build a dependency that admits only callers whose token carries `role`."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        check_role(current_user.role, role)
        return current_user

    return dependency


require_admin = require_role(ROLE_ADMIN)
