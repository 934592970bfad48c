"""Unit tests for app.services.auth: registration, login, token checks, role gate."""

import unittest
from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.security import create_access_token, decode_access_token, hash_password
from app.services.auth import AuthService, check_role
from app.services.errors import (
    ConflictError,
    ForbiddenError,
    InternalError,
    UnauthorizedError,
)


def _stored_user(password: str = "password", role: str = "user") -> SimpleNamespace:
    return SimpleNamespace(
        id=1,
        email="test@shop.io",
        role=role,
        password_hash=hash_password(password),
    )


class TestRegister(unittest.TestCase):
    def setUp(self) -> None:
        self.users = MagicMock()
        self.service = AuthService(self.users)

    def test_registers_new_user_with_hashed_password(self) -> None:
        self.users.find_by_email.return_value = None
        self.users.insert.side_effect = lambda user: user

        user = self.service.register("test@shop.io", "password", "user")

        self.assertEqual(user.email, "test@shop.io")
        self.assertEqual(user.role, "user")
        self.assertNotEqual(user.password_hash, "password")
        self.users.find_by_email.assert_called_once_with("test@shop.io")
        self.users.insert.assert_called_once()

    def test_duplicate_email_conflicts(self) -> None:
        self.users.find_by_email.return_value = _stored_user()
        with self.assertRaises(ConflictError) as ctx:
            self.service.register("test@shop.io", "password", "user")
        self.assertEqual(ctx.exception.status_code, 409)
        self.users.insert.assert_not_called()

    def test_invalid_role_conflicts(self) -> None:
        self.users.find_by_email.return_value = None
        with self.assertRaises(ConflictError):
            self.service.register("test@shop.io", "password", "invalid_role")
        self.users.insert.assert_not_called()

    def test_insert_failure_is_internal_error(self) -> None:
        self.users.find_by_email.return_value = None
        self.users.insert.side_effect = RuntimeError("disk full")
        with self.assertRaises(InternalError) as ctx:
            self.service.register("test@shop.io", "password", "user")
        self.assertNotIn("disk full", ctx.exception.message)

    def test_unique_violation_on_insert_conflicts(self) -> None:
        self.users.find_by_email.return_value = None
        self.users.insert.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE"))
        with self.assertRaises(ConflictError):
            self.service.register("test@shop.io", "password", "user")

    def test_lookup_failure_is_internal_error(self) -> None:
        self.users.find_by_email.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with self.assertRaises(InternalError):
            self.service.register("test@shop.io", "password", "user")

    def test_hashing_failure_is_internal_error(self) -> None:
        self.users.find_by_email.return_value = None
        with patch("app.services.auth.hash_password", side_effect=ValueError("bad salt")):
            with self.assertRaises(InternalError):
                self.service.register("test@shop.io", "password", "user")
        self.users.insert.assert_not_called()


class TestLogin(unittest.TestCase):
    def setUp(self) -> None:
        self.users = MagicMock()
        self.service = AuthService(self.users)

    def test_returns_token_with_user_claims(self) -> None:
        self.users.find_by_email.return_value = _stored_user(role="admin")

        token = self.service.login("test@shop.io", "password")

        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "1")
        self.assertEqual(payload["email"], "test@shop.io")
        self.assertEqual(payload["role"], "admin")

    def test_wrong_password_is_unauthorized(self) -> None:
        self.users.find_by_email.return_value = _stored_user()
        with self.assertRaises(UnauthorizedError) as ctx:
            self.service.login("test@shop.io", "wrongPassword")
        self.assertEqual(ctx.exception.message, "Invalid credentials")

    def test_unknown_email_is_unauthorized(self) -> None:
        self.users.find_by_email.return_value = None
        with self.assertRaises(UnauthorizedError):
            self.service.login("nobody@shop.io", "password")

    def test_lookup_failure_is_internal_error(self) -> None:
        self.users.find_by_email.side_effect = RuntimeError("connection reset")
        with self.assertRaises(InternalError) as ctx:
            self.service.login("test@shop.io", "password")
        self.assertNotIsInstance(ctx.exception, UnauthorizedError)


class TestAuthenticateToken(unittest.TestCase):
    def test_valid_token_yields_claims(self) -> None:
        token = create_access_token(sub=42, email="a@b.com", role="user")
        claims = AuthService.authenticate_token(token)
        self.assertEqual(claims.user_id, 42)
        self.assertEqual(claims.email, "a@b.com")
        self.assertEqual(claims.role, "user")

    def test_missing_token(self) -> None:
        with self.assertRaises(UnauthorizedError):
            AuthService.authenticate_token(None)
        with self.assertRaises(UnauthorizedError):
            AuthService.authenticate_token("")

    def test_garbage_token(self) -> None:
        with self.assertRaises(UnauthorizedError):
            AuthService.authenticate_token("not.a.jwt")

    def test_expired_token(self) -> None:
        token = create_access_token(
            sub=1, email="a@b.com", role="user", expires_delta=timedelta(minutes=-1)
        )
        with self.assertRaises(UnauthorizedError) as ctx:
            AuthService.authenticate_token(token)
        self.assertEqual(ctx.exception.message, "Invalid or expired token")

    def test_unknown_role_claim(self) -> None:
        token = create_access_token(sub=1, email="a@b.com", role="superuser")
        with self.assertRaises(UnauthorizedError):
            AuthService.authenticate_token(token)

    def test_non_numeric_subject(self) -> None:
        token = create_access_token(sub="abc", email="a@b.com", role="user")
        with self.assertRaises(UnauthorizedError):
            AuthService.authenticate_token(token)


class TestCheckRole(unittest.TestCase):
    def test_matching_role_passes(self) -> None:
        check_role("admin", "admin")

    def test_mismatch_is_forbidden_reported_as_401(self) -> None:
        with self.assertRaises(ForbiddenError) as ctx:
            check_role("user", "admin")
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.message, "Admin access required")


if __name__ == "__main__":
    unittest.main()
