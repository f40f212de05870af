"""End-to-end tests for posts, likes and comments."""

from uuid import uuid4

import pytest

from tests.e2e.helpers import make_client, register, whoami


@pytest.fixture
def client():
    """Create test client."""
    return make_client()


def _create_post(client, headers, text="Hello world"):
    response = client.post("/posts", json={"text": text}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestPostLifecycle:
    """Two users interacting on one post."""

    def test_like_comment_and_delete_scenario(self, client):
        # Arrange
        ada = register(client, "Ada", "ada@example.com")
        grace = register(client, "Grace", "grace@example.com")
        ada_id = whoami(client, ada)["id"]
        grace_id = whoami(client, grace)["id"]

        # Ada posts and likes her own post
        post = _create_post(client, ada)
        assert post["user_id"] == ada_id
        assert post["name"] == "Ada"

        liked = client.put(f"/posts/like/{post['id']}", headers=ada)
        assert liked.status_code == 200
        assert liked.json() == [{"user_id": ada_id}]

        # A second like is refused and changes nothing
        again = client.put(f"/posts/like/{post['id']}", headers=ada)
        assert again.status_code == 400
        assert again.json() == {"success": False, "msg": "Post already liked"}
        assert len(client.get(f"/posts/{post['id']}", headers=ada).json()["likes"]) == 1

        # Grace comments
        commented = client.post(
            f"/posts/comment/{post['id']}", json={"text": "Nice"}, headers=grace
        )
        assert commented.status_code == 200
        comments = commented.json()
        assert len(comments) == 1
        assert comments[0]["user_id"] == grace_id
        assert comments[0]["name"] == "Grace"
        comment_id = comments[0]["id"]

        # The post's author may not remove Grace's comment
        denied = client.delete(f"/posts/{post['id']}/{comment_id}", headers=ada)
        assert denied.status_code == 401
        assert denied.json() == {"success": False, "msg": "User not authorized"}

        # Grace may
        removed = client.delete(f"/posts/{post['id']}/{comment_id}", headers=grace)
        assert removed.status_code == 200
        assert removed.json() == []

    def test_unlike_withdraws_like(self, client):
        # Arrange
        ada = register(client, "Ada", "ada@example.com")
        grace = register(client, "Grace", "grace@example.com")
        post = _create_post(client, ada)
        client.put(f"/posts/like/{post['id']}", headers=grace)

        # Act
        not_yet = client.put(f"/posts/unlike/{post['id']}", headers=ada)
        after_rejection = client.get(f"/posts/{post['id']}", headers=ada)
        client.put(f"/posts/like/{post['id']}", headers=ada)
        unliked = client.put(f"/posts/unlike/{post['id']}", headers=ada)

        # Assert
        grace_id = whoami(client, grace)["id"]
        assert not_yet.status_code == 400
        assert not_yet.json()["msg"] == "Post has not yet been liked"
        assert after_rejection.json()["likes"] == [{"user_id": grace_id}]
        assert unliked.status_code == 200
        assert unliked.json() == [{"user_id": grace_id}]


class TestPostQueries:
    """Listing, counting and fetching posts."""

    def test_list_and_count(self, client):
        # Arrange
        ada = register(client, "Ada", "ada@example.com")
        grace = register(client, "Grace", "grace@example.com")
        _create_post(client, ada, "one")
        _create_post(client, ada, "two")
        _create_post(client, grace, "three")

        # Act
        listed = client.get("/posts", headers=grace)
        count = client.get("/posts/count", headers=ada)

        # Assert
        assert listed.status_code == 200
        assert sorted(p["text"] for p in listed.json()) == ["one", "three", "two"]
        assert count.json() == {"count": 2}

    def test_missing_post_is_404(self, client):
        ada = register(client, "Ada", "ada@example.com")

        response = client.get(f"/posts/{uuid4()}", headers=ada)

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_malformed_post_id_is_404(self, client):
        ada = register(client, "Ada", "ada@example.com")

        response = client.get("/posts/not-a-valid-id", headers=ada)

        assert response.status_code == 404
        assert response.json() == {"success": False, "msg": "Resource not found"}

    def test_empty_text_is_rejected(self, client):
        ada = register(client, "Ada", "ada@example.com")

        response = client.post("/posts", json={"text": ""}, headers=ada)

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "text"


class TestPostDeletion:
    """DELETE /posts/{post_id}."""

    def test_only_author_may_delete(self, client):
        # Arrange
        ada = register(client, "Ada", "ada@example.com")
        grace = register(client, "Grace", "grace@example.com")
        post = _create_post(client, ada)

        # Act
        denied = client.delete(f"/posts/{post['id']}", headers=grace)
        allowed = client.delete(f"/posts/{post['id']}", headers=ada)
        gone = client.get(f"/posts/{post['id']}", headers=ada)

        # Assert
        assert denied.status_code == 401
        assert allowed.status_code == 200
        assert allowed.json() == {"success": True, "msg": "Post removed"}
        assert gone.status_code == 404

    def test_delete_missing_post_is_404(self, client):
        ada = register(client, "Ada", "ada@example.com")

        response = client.delete(f"/posts/{uuid4()}", headers=ada)

        assert response.status_code == 404
