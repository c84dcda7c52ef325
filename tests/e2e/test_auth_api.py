"""End-to-end tests for authentication and health endpoints."""

from uuid import uuid4

from stories.config import Settings
from stories.domain.service import JWTService
from stories.domain.value import UserId


class TestCurrentUser:
    def test_me_returns_profile(self, client, member):
        user, headers = member("Alice Martin", promotion="2017")

        response = client.get("/api/auth/me", headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == str(user.id)
        assert body["name"] == "Alice Martin"
        assert body["email"] == user.email
        assert body["promotion"] == "2017"
        assert body["verified"] is True

    def test_me_without_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_me_with_bad_token(self, client):
        response = client.get(
            "/api/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    def test_me_for_deleted_user(self, client):
        token = JWTService(Settings().auth).create_token(UserId(uuid4()))

        response = client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["realtime_connections"] == 0
