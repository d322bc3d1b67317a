"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.database import init_db
from catalog.main import create_app
from catalog.services.auth import verify_access_token

TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file, without sample projects."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.sqlite'}",
        seed_sample_projects=False,
        jwt_secret="test-secret",
        environment="test",
    )


@pytest.fixture
def app(settings):
    """Create a fresh application for each test."""
    return create_app(settings)


@pytest.fixture
def context(app):
    """The application context with its schema created."""
    ctx = app.state.context
    init_db(ctx.engine, seed=False)
    yield ctx
    ctx.dispose()


@pytest.fixture
def db(context):
    """A database session on the test store."""
    session = context.session_factory()
    yield session
    session.close()


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the startup hook."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Register and log in a user, returning bearer headers with user info."""
    response = client.post("/api/register", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})
    assert response.status_code == 201

    response = client.post("/api/login", json={"email": TEST_EMAIL, "password": TEST_PASSWORD})
    assert response.status_code == 200
    token = response.json()["token"]

    identity = verify_access_token(token, client.app.state.context.settings)
    return AuthHeaders(
        {"Authorization": f"Bearer {token}"}, user_id=identity.user_id, email=identity.email
    )
