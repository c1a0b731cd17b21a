"""Tests for authentication API endpoints."""

from datetime import UTC, datetime, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from studydeck import models
from tests.conftest import TEST_PASSWORD, create_test_user


class TestLogin:
    """Test suite for POST /auth/login."""

    def test_login(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": TEST_PASSWORD}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["token_type"] == "bearer"
        assert "refresh_token" in response.cookies

        me = client.get(
            "/api/v1/users/me", headers={"Authorization": f"Bearer {data['access_token']}"}
        )
        assert me.status_code == status.HTTP_200_OK

    def test_login_advances_streak(self, client: TestClient, db_session: Session) -> None:
        """Logging in counts as activity."""
        user = create_test_user(
            db_session,
            email="daily@test.com",
            streak=2,
            last_active_at=datetime.now(UTC) - timedelta(days=1),
        )

        client.post("/api/v1/auth/login", data={"username": user.email, "password": TEST_PASSWORD})

        db_session.expire_all()
        stored = db_session.get(models.User, user.id)
        assert stored is not None
        assert stored.streak == 3

    def test_login_wrong_password(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": "nope-nope"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Incorrect email or password"

    def test_login_unknown_email(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/login", data={"username": "ghost@test.com", "password": TEST_PASSWORD}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestRefresh:
    """Test suite for POST /auth/refresh and /auth/logout."""

    def test_refresh_with_body(self, client: TestClient, test_user: models.User) -> None:
        login = client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": TEST_PASSWORD}
        ).json()
        client.cookies.clear()

        response = client.post(
            "/api/v1/auth/refresh", json={"refresh_token": login["refresh_token"]}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    def test_access_token_cannot_refresh(
        self, client: TestClient, test_user: models.User
    ) -> None:
        login = client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": TEST_PASSWORD}
        ).json()
        client.cookies.clear()

        response = client.post(
            "/api/v1/auth/refresh", json={"refresh_token": login["access_token"]}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_without_token(self, client: TestClient) -> None:
        response = client.post("/api/v1/auth/refresh")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Refresh token required"

    def test_logout(self, client: TestClient) -> None:
        response = client.post("/api/v1/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
