"""Fixtures for end-to-end tests.

The app runs with in-memory persistence. Tests seed users straight into the
shared in-memory store and authenticate with real signed tokens.
"""

import pytest
from fastapi.testclient import TestClient

from stories.config import Settings
from stories.domain.service import JWTService
from stories.interface.api.app import create_app
from stories.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def client(database):
    """Test client; entering it runs the app lifespan."""
    app = create_app(
        settings=Settings(environment="test"),
        container=build_test_container(database=database),
    )
    with TestClient(app) as client:
        yield client


@pytest.fixture
def member(database):
    """Factory that stores a user and returns (user, auth headers)."""
    # Same settings source as the container, so tokens verify
    jwt_service = JWTService(Settings().auth)

    def _member(name: str = "Alice Martin", **overrides):
        user = make_user(name, **overrides)
        database.users[user.id] = user
        token = jwt_service.create_token(user.id)
        return user, {"Authorization": f"Bearer {token}"}

    return _member
