"""End-to-end tests for content, vote and comment endpoints."""

import pytest
from fastapi.testclient import TestClient

from camp.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


def _post_tip(client, author="author", text="Hang food 4m up"):
    response = client.post(
        "/content/tip", json={"text": text}, headers={"X-User-Id": author}
    )
    assert response.status_code == 201
    return response.json()["content_id"]


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["local_store_resources"] == []


class TestContentEndpoints:
    """End-to-end tests for posting and listing content."""

    def test_post_requires_identity(self, client):
        response = client.post("/content/tip", json={"text": "No name"})

        assert response.status_code == 401
        assert response.json()["error"] == "UnauthenticatedError"

    def test_unknown_content_type_rejected(self, client):
        response = client.get("/content/recipe")

        assert response.status_code == 422

    def test_feed_orders_by_score_with_viewer_votes(self, client):
        first = _post_tip(client, text="First")
        second = _post_tip(client, text="Second")
        client.post(
            f"/content/tip/{second}/vote",
            json={"vote_type": "up"},
            headers={"X-User-Id": "alice"},
        )

        response = client.get(
            "/content/tip", params={"sort": "score"}, headers={"X-User-Id": "alice"}
        )

        assert response.status_code == 200
        items = response.json()["items"]
        assert [i["content_id"] for i in items] == [second, first]
        assert [i["user_vote"] for i in items] == ["up", "none"]

    def test_delete_by_non_author_forbidden(self, client):
        content_id = _post_tip(client, author="author")

        forbidden = client.delete(
            f"/content/tip/{content_id}", headers={"X-User-Id": "mallory"}
        )
        deleted = client.delete(
            f"/content/tip/{content_id}", headers={"X-User-Id": "author"}
        )

        assert forbidden.status_code == 403
        assert deleted.status_code == 204
        assert client.get(f"/content/tip/{content_id}/vote").status_code == 404

    def test_comments(self, client):
        content_id = _post_tip(client)

        created = client.post(
            f"/content/tip/{content_id}/comments",
            json={"text": "Thanks"},
            headers={"X-User-Id": "bob"},
        )
        listed = client.get(f"/content/tip/{content_id}/comments")

        assert created.status_code == 201
        assert [c["text"] for c in listed.json()["comments"]] == ["Thanks"]


class TestVoteEndpoints:
    """End-to-end tests for voting."""

    def test_vote_switch_and_toggle(self, client):
        content_id = _post_tip(client)
        url = f"/content/tip/{content_id}/vote"
        headers = {"X-User-Id": "alice"}

        up = client.post(url, json={"vote_type": "up"}, headers=headers).json()
        down = client.post(url, json={"vote_type": "down"}, headers=headers).json()
        cleared = client.post(url, json={"vote_type": "down"}, headers=headers).json()

        assert (up["user_vote"], up["score"]) == ("up", 1)
        assert (down["user_vote"], down["upvote_count"], down["downvote_count"]) == (
            "down",
            0,
            1,
        )
        assert (cleared["user_vote"], cleared["score"]) == ("none", 0)

    def test_anonymous_vote_unauthorized(self, client):
        content_id = _post_tip(client)

        response = client.post(
            f"/content/tip/{content_id}/vote", json={"vote_type": "up"}
        )

        assert response.status_code == 401

    def test_vote_on_missing_item(self, client):
        response = client.post(
            "/content/tip/missing/vote",
            json={"vote_type": "up"},
            headers={"X-User-Id": "alice"},
        )

        assert response.status_code == 404

    def test_invalid_vote_type(self, client):
        content_id = _post_tip(client)

        response = client.post(
            f"/content/tip/{content_id}/vote",
            json={"vote_type": "sideways"},
            headers={"X-User-Id": "alice"},
        )

        assert response.status_code == 422
