"""
Pytest configuration and fixtures

Every test runs against a fresh in-memory SQLite schema; tables are
created before and dropped after each test.
"""
import os

# Must be set before the app modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["HOST_PREFIX"] = "7"

from itertools import count

import pytest
from fastapi.testclient import TestClient

from app.core.config import Base, SessionLocal, engine, get_db
from app.core.security import create_access_token, hash_password
from app.models import User
from main import app

TEST_PASSWORD = "Password123"

_user_ids = count(1000)


@pytest.fixture(scope="session")
def password_hash():
    """bcrypt is slow, hash the shared test password once."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session, password_hash):
    """Insert a user directly; returns the committed row."""
    def _make_user(id=None, **kwargs):
        user_id = id if id is not None else next(_user_ids)
        defaults = dict(
            id=user_id,
            first_name="Test",
            last_name="User",
            email=f"user_{user_id}@example.com",
            password_hash=password_hash,
            is_active=True,
        )
        defaults.update(kwargs)
        user = User(**defaults)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user_or_id) -> dict:
        user_id = getattr(user_or_id, "id", user_or_id)
        token = create_access_token({"sub": str(user_id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers
