"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.database import Base, get_db, init_db
from src.main import create_app

TEST_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session")
def settings(tmp_path_factory):
    """Settings pointing every resource at a throwaway directory."""
    root = tmp_path_factory.mktemp("repair_shop")

    public_dir = root / "public"
    public_dir.mkdir()
    (public_dir / "index.html").write_text('<!doctype html><div id="app"></div>')
    (public_dir / "app.js").write_text("console.log('app');")

    # Use a real MySQL test database when one is provided, SQLite otherwise
    database_url = os.getenv("TEST_DATABASE_URL", f"sqlite:///{root / 'test.db'}")

    return Settings(
        database_url=database_url,
        jwt_secret="test-secret",  # noqa: S106
        bcrypt_rounds=10,
        upload_dir=str(root / "uploads"),
        public_dir=str(public_dir),
        max_upload_bytes=1024,
        environment="test",
    )


@pytest.fixture(scope="session")
def app(settings):
    """Application built from the test settings."""
    return create_app(settings)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database(app):
    """Create test database schema once at the start of the test session."""
    init_db(app.state.engine)
    yield
    app.state.engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db(app):
    """Create a fresh database session for each test with cleanup."""
    session = app.state.session_factory()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(app, db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register and log in a user, returning bearer auth headers."""
    email = "test@example.com"
    response = client.post("/api/register", json={"email": email, "password": TEST_PASSWORD})
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/api/login", json={"email": email, "password": TEST_PASSWORD})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)
