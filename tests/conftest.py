"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the environment must be set before
# anything from studydeck is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("ALLOW_USER_REGISTRATIONS", "true")

from collections.abc import Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from studydeck import models  # noqa: E402
from studydeck.core import container  # noqa: E402
from studydeck.database import Base, get_db  # noqa: E402
from studydeck.infrastructure.identity.services.password_service import hash_password  # noqa: E402
from studydeck.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from studydeck.main import app  # noqa: E402
from tests.fakes import FakeContentGenerator  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"

# Test database (in-memory SQLite shared by every session through one connection)
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(test_engine, "connect")
def _enable_foreign_keys(dbapi_connection, _record) -> None:  # noqa: ANN001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def fake_generator() -> Generator[FakeContentGenerator, None, None]:
    """Replace the AI content generator with an in-memory fake."""
    generator = FakeContentGenerator()
    container.content_generator.override(providers.Object(generator))
    yield generator
    container.content_generator.reset_override()


@pytest.fixture
def client(
    db_session: Session, fake_generator: FakeContentGenerator
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_user(
    db_session: Session,
    email: str,
    name: str = "Test User",
    password: str = TEST_PASSWORD,
    streak: int = 1,
    last_active_at: datetime | None = None,
    active_days: list[str] | None = None,
) -> models.User:
    user = models.User(
        email=email,
        name=name,
        hashed_password=hash_password(password),
        streak=streak,
        last_active_at=last_active_at or datetime.now(UTC),
        active_days=active_days or [],
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the default user that requests authenticate as."""
    return create_test_user(db_session, email="student@test.com")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """A second user, for ownership checks."""
    return create_test_user(db_session, email="other@test.com", name="Other User")


def auth_headers_for(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    """Bearer headers for the default user."""
    return auth_headers_for(test_user)


SAMPLE_CARDS = [
    {"term": "Mitosis", "definition": "cell division"},
    {"term": "Osmosis", "definition": "water diffusion"},
    {"term": "Enzyme", "definition": "biological catalyst"},
]


def create_test_set(
    client: TestClient,
    headers: dict[str, str],
    cards: list[dict[str, str]] | None = None,
    content_type: str | None = None,
    title: str = "Biology",
) -> dict[str, Any]:
    """Create a set through the API and return the response body."""
    response = client.post(
        "/api/v1/sets",
        json={
            "title": title,
            "description": "Chapter 1",
            "cards": SAMPLE_CARDS if cards is None else cards,
            "content_type": content_type,
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
