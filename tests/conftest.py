# File: tests/conftest.py

"""
Shared fixtures.

Environment is set before the app is imported so `settings` picks it up.
Each test gets its own in-memory SQLite database and a fake Google
verifier, so nothing here touches the network.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("GOOGLE_CLIENT_ID", "test-client-id.apps.googleusercontent.com")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from review_api.api.deps import get_db, get_identity_verifier
from review_api.core.errors import InvalidAssertion
from review_api.main import app
from review_api.models.base import Base
from review_api.models import user  # noqa: F401
from review_api.services.google_identity import GoogleIdentity


class FakeGoogleVerifier:
    """Maps known credential strings to identities; rejects everything else."""

    def __init__(self):
        self.identities: dict[str, GoogleIdentity] = {}

    def add(self, credential: str, **claims) -> None:
        claims.setdefault("name", None)
        claims.setdefault("picture", None)
        claims.setdefault("email_verified", True)
        self.identities[credential] = GoogleIdentity(**claims)

    def verify(self, assertion: str) -> GoogleIdentity:
        try:
            return self.identities[assertion]
        except KeyError:
            raise InvalidAssertion("Wrong number of segments in token")


@pytest.fixture(scope="function")
def test_db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def google_verifier():
    return FakeGoogleVerifier()


@pytest.fixture(scope="function")
def client(test_db, google_verifier):
    def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_verifier] = lambda: google_verifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    resp = client.post(
        "/auth/register",
        json={"email": "a@b.com", "password": "pw123456", "username": "a"},
    )
    assert resp.status_code == 201
    return resp.json()
