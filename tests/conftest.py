"""Pytest configuration for all tests."""
import os

# Must be set before the app modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.sessions import get_db
from app.core.security import create_access_token
from app.models import User


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


def _make_user(session: Session, name: str, email: str) -> User:
    user = User(name=name, email=email, password_hash="not-a-real-hash")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def user_a(db_session) -> User:
    return _make_user(db_session, "Alice", "alice@example.com")


@pytest.fixture
def user_b(db_session) -> User:
    return _make_user(db_session, "Bob", "bob@example.com")


@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    """Test client with the database dependency pointed at the test engine."""
    from app.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides = {}


@pytest.fixture
def auth_headers() -> Callable[[User], Dict[str, str]]:
    """Build bearer headers for a user."""

    def _headers(user: User) -> Dict[str, str]:
        token = create_access_token(data={"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers
