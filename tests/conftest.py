"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so these must be set before importing src
os.environ.setdefault("AUTH_SECRET", "test-server-secret")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src import models  # noqa: E402, F401
from src.config import get_settings  # noqa: E402
from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.services.user_directory import UserDirectory  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

COOKIE_NAME = get_settings().auth_cookie_name


class RegisteredUser(dict):
    """Dict of the registered user's public fields that also keeps the password."""

    def __init__(self, *args, password: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.password = password


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
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


@pytest.fixture
def directory(db):
    return UserDirectory(db)


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


def register(client, username: str, email: str, password: str) -> RegisteredUser:
    response = client.post(
        "/api/v1/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201
    return RegisteredUser(response.json(), password=password)


def login(client, email: str, password: str) -> str:
    """Log in and return the session token that was set as a cookie."""
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.cookies.get(COOKIE_NAME)
    assert token
    return token


def use_session(client, token: str | None) -> None:
    """Make the client send ``token`` as its only session cookie."""
    client.cookies.clear()
    if token is not None:
        client.cookies.set(COOKIE_NAME, token)


@pytest.fixture
def alice(client):
    return register(client, "alice", "a@x.com", "secret123")


@pytest.fixture
def bob(client):
    return register(client, "bob", "b@x.com", "hunter222")


@pytest.fixture
def alice_token(client, alice):
    return login(client, alice["email"], alice.password)


@pytest.fixture
def bob_token(client, bob):
    return login(client, bob["email"], bob.password)


@pytest.fixture
def act_as(client):
    """Switch the client's session cookie to the given token (None for no cookie)."""

    def _act_as(token: str | None) -> None:
        use_session(client, token)

    return _act_as
