"""Registration, login and bearer-token checks."""

import logging
from dataclasses import dataclass

import jwt
from sqlalchemy.exc import IntegrityError

from app.core.roles import ROLE_ADMIN, is_valid_role
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.repositories.users import UserRepository
from app.services.errors import (
    ConflictError,
    ForbiddenError,
    InternalError,
    ServiceError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: int
    email: str
    role: str


class AuthService:
    """Registers users and issues/verifies access tokens."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def register(self, email: str, password: str, role: str) -> User:
        """
        Create a user with a bcrypt-hashed password.

        Raises ConflictError when the email is taken or the role is unknown,
        InternalError when the store or hashing fails.
        """
        try:
            existing = self.users.find_by_email(email)
        except Exception as e:
            logger.exception("User lookup failed during registration")
            raise InternalError("Error occurred while registering user") from e
        if existing is not None:
            raise ConflictError("User with this email already exists")
        if not is_valid_role(role):
            raise ConflictError("Invalid role provided")

        try:
            user = User(email=email, password_hash=hash_password(password), role=role)
            user = self.users.insert(user)
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            raise ConflictError("User with this email already exists") from e
        except Exception as e:
            logger.exception("Failed to persist new user")
            raise InternalError("Error occurred while registering user") from e

        logger.info("Registered user id=%s role=%s", user.id, user.role)
        return user

    def login(self, email: str, password: str) -> str:
        """Verify credentials and return a signed access token."""
        try:
            user = self.users.find_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                logger.warning("Rejected login attempt")
                raise UnauthorizedError("Invalid credentials")
            return create_access_token(sub=user.id, email=user.email, role=user.role)
        except ServiceError:
            raise
        except Exception as e:
            logger.exception("Login failed")
            raise InternalError("Error occurred while logging in") from e

    def list_users(self) -> list[User]:
        try:
            return self.users.list_all()
        except Exception as e:
            logger.exception("Failed to list users")
            raise InternalError("Failed to fetch users") from e

    @staticmethod
    def authenticate_token(token: str | None) -> TokenClaims:
        """
        Verify signature and expiry of a bearer token and return its claims.
        The store is not consulted; tokens are self-contained.
        """
        if not token:
            raise UnauthorizedError("Not authenticated")
        try:
            payload = decode_access_token(token)
        except jwt.PyJWTError as e:
            raise UnauthorizedError("Invalid or expired token") from e

        role = payload.get("role")
        if not is_valid_role(role):
            raise UnauthorizedError("Invalid token payload")
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise UnauthorizedError("Invalid token payload") from e
        return TokenClaims(user_id=user_id, email=str(payload.get("email", "")), role=role)


def check_role(role: str, required_role: str) -> None:
    """Raise ForbiddenError unless the caller's role claim matches required_role."""
    if role != required_role:
        if required_role == ROLE_ADMIN:
            raise ForbiddenError("Admin access required")
        raise ForbiddenError(f"Role '{required_role}' required")
