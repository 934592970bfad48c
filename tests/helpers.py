"""Shared fixtures for HTTP tests: app wired to a private in-memory SQLite database."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base


class ApiTestCase(unittest.TestCase):
    """Each test gets fresh tables and a TestClient whose get_db uses them."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.engine.dispose()

    def register(self, email: str, password: str = "pw", role: str = "user"):
        return self.client.post(
            "/auth/register", json={"email": email, "password": password, "role": role}
        )

    def login(self, email: str, password: str = "pw"):
        return self.client.post("/auth/login", json={"email": email, "password": password})

    def auth_headers(self, email: str, role: str = "user") -> dict[str, str]:
        """Register (role) and log in; return an Authorization header for the token."""
        self.assertEqual(self.register(email, role=role).status_code, 201)
        resp = self.login(email)
        self.assertEqual(resp.status_code, 200)
        return {"Authorization": f"Bearer {resp.json()['accessToken']}"}
