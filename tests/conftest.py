"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; provide test values before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET", "test-secret-do-not-use")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user."""

    def __init__(self, *args, user_id: str | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


DATABASE_URL = os.environ["DATABASE_URL"]
if "postgresql" in DATABASE_URL:
    # Never run tests against the main database
    SQLALCHEMY_DATABASE_URL = DATABASE_URL.rsplit("/", 1)[0] + "/myarea_test"
else:
    SQLALCHEMY_DATABASE_URL = DATABASE_URL

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
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


def _register(client, email: str, username: str, password: str = "secret1") -> AuthHeaders:
    """Register a user and return bearer headers for it."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": email,
            "username": username,
            "display_name": username.title(),
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        username=data["user"]["username"],
    )


@pytest.fixture
def register_user(client):
    """Factory fixture: register a user by email and username, get its auth headers."""

    def register(email: str, username: str, password: str = "secret1") -> AuthHeaders:
        return _register(client, email, username, password)

    return register


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register(client, "alice@example.com", "alice")


@pytest.fixture
def other_auth_headers(client):
    """A second user, for ownership checks."""
    return _register(client, "bob@example.com", "bob")


@pytest.fixture
def location_payload():
    """A valid location creation payload."""
    return {
        "name": "Tartine Bakery",
        "description": "Famous bakery",
        "category": "cafe",
        "address": "600 Guerrero St, San Francisco, CA 94110",
        "latitude": 37.7617,
        "longitude": -122.4240,
        "city": "San Francisco",
        "rating": 4,
        "price_level": 3,
        "tags": ["bakery", "coffee"],
    }
