"""
Shared fixtures for the portfolio API tests.

Every test runs against its own temporary SQLite file with the schema
applied and a known signing secret, so tests never touch a real
database or depend on the environment.
"""

import pytest
from fastapi.testclient import TestClient

from portfolio_api.app.core.config import settings
from portfolio_api.app.core.db import init_db, transaction
from portfolio_api.app.core.security import create_access_token
from portfolio_api.app.entities import Profile
from portfolio_api.app.main import create_app
from portfolio_api.app.repositories import ProfileRepository

TEST_SECRET = "portfolio-test-secret-0123456789abcdef"


@pytest.fixture(autouse=True)
def test_database(tmp_path, monkeypatch):
    """Point the app at a fresh database file and a test secret."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "portfolio-test.db"))
    monkeypatch.setattr(settings, "jwt_secret", TEST_SECRET)
    init_db()
    return settings.database_url


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def token():
    return create_access_token({"sub": "owner@example.com", "role": "authenticated"})


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def seed_profile():
    """Insert profile 1, John Doe, and return the stored entity."""
    with transaction() as conn:
        return ProfileRepository().save(conn, Profile(first_name="John", last_name="Doe"))


@pytest.fixture
def row_count():
    """Return a function counting the rows of a table."""

    def count(table: str) -> int:
        with transaction(read_only=True) as conn:
            return conn.execute(f"SELECT COUNT(*) AS n FROM {table}").fetchone()["n"]

    return count
