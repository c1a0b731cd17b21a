"""Tests for flashcard review API endpoints."""

from datetime import UTC, datetime, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from studydeck import models
from tests.conftest import auth_headers_for, create_test_set, create_test_user


class TestUpdateFlashcardStatus:
    """Test suite for PUT /flashcards/{id}/status."""

    def test_mark_mastered(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        card_id = create_test_set(client, auth_headers)["cards"][0]["id"]
        before = datetime.now(UTC)

        response = client.put(
            f"/api/v1/flashcards/{card_id}/status",
            json={"status": "mastered"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["flashcard"]["status"] == "mastered"
        next_review = datetime.fromisoformat(data["flashcard"]["next_review_at"])
        if next_review.tzinfo is None:
            next_review = next_review.replace(tzinfo=UTC)
        assert next_review >= before + timedelta(days=3)

        db_session.expire_all()
        stored = db_session.get(models.Flashcard, card_id)
        assert stored is not None
        assert stored.status == "mastered"

    def test_invalid_status(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        card_id = create_test_set(client, auth_headers)["cards"][0]["id"]

        response = client.put(
            f"/api/v1/flashcards/{card_id}/status",
            json={"status": "forgotten"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        db_session.expire_all()
        stored = db_session.get(models.Flashcard, card_id)
        assert stored is not None
        assert stored.status == "learning"

    def test_missing_card(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/v1/flashcards/999/status", json={"status": "mastered"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_other_users_card(
        self, client: TestClient, auth_headers: dict[str, str], other_user: models.User
    ) -> None:
        card_id = create_test_set(client, auth_headers_for(other_user))["cards"][0]["id"]

        response = client.put(
            f"/api/v1/flashcards/{card_id}/status",
            json={"status": "mastered"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestDueFlashcards:
    """Test suite for GET /flashcards/due."""

    def test_new_cards_are_due(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        created = create_test_set(client, auth_headers)

        response = client.get("/api/v1/flashcards/due", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        due_ids = [c["id"] for c in response.json()["flashcards"]]
        assert sorted(due_ids) == sorted(c["id"] for c in created["cards"])

    def test_mastered_cards_are_not_due(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        created = create_test_set(client, auth_headers)
        mastered_id = created["cards"][0]["id"]
        client.put(
            f"/api/v1/flashcards/{mastered_id}/status",
            json={"status": "mastered"},
            headers=auth_headers,
        )

        response = client.get("/api/v1/flashcards/due", headers=auth_headers)

        due_ids = {c["id"] for c in response.json()["flashcards"]}
        assert mastered_id not in due_ids
        assert len(due_ids) == 2

    def test_only_own_cards_are_due(
        self, client: TestClient, auth_headers: dict[str, str], other_user: models.User
    ) -> None:
        create_test_set(client, auth_headers_for(other_user))

        response = client.get("/api/v1/flashcards/due", headers=auth_headers)

        assert response.json()["flashcards"] == []


class TestStudyStats:
    """Test suite for GET /flashcards/stats."""

    def test_stats(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        first = create_test_set(client, auth_headers)
        create_test_set(client, auth_headers, cards=[], title="Empty")
        for card in first["cards"][:2]:
            client.put(
                f"/api/v1/flashcards/{card['id']}/status",
                json={"status": "mastered"},
                headers=auth_headers,
            )

        response = client.get("/api/v1/flashcards/stats", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"total_sets": 2, "cards_mastered": 2, "streak": 1}

    def test_stats_do_not_advance_streak(
        self, client: TestClient, db_session: Session
    ) -> None:
        """Reading stats reports the stored streak, even if it is stale."""
        user = create_test_user(
            db_session,
            email="returning@test.com",
            streak=5,
            last_active_at=datetime.now(UTC) - timedelta(days=1),
        )

        response = client.get("/api/v1/flashcards/stats", headers=auth_headers_for(user))

        assert response.json()["streak"] == 5
        db_session.expire_all()
        stored = db_session.get(models.User, user.id)
        assert stored is not None
        assert stored.streak == 5
        assert stored.active_days == []
