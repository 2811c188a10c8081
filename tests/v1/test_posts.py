# mypy: ignore-errors
"""Tests for forum post endpoints."""

from unittest.mock import patch

from fastapi import status
from sqlalchemy.exc import OperationalError

from agora_forum.core.security import create_access_token
from agora_forum.models import Post

BASE = "/api/v1/forums"


def test_list_posts_empty(client, forum) -> None:
    response = client.get(f"{BASE}/F1/posts")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_list_posts_missing_forum(client) -> None:
    response = client.get(f"{BASE}/nope/posts")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "nope" in response.json()["detail"]


def test_get_forum(client, alice_post) -> None:
    response = client.get(f"{BASE}/F1")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == "F1"
    assert [post["id"] for post in data["posts"]] == [alice_post.id]


def test_create_post_success(client, forum, alice_headers) -> None:
    response = client.put(
        f"{BASE}/F1/posts",
        json={"title": "title", "content": "body"},
        headers=alice_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["id"] == "F1"
    assert len(data["posts"]) == 1
    assert data["posts"][0]["author"] == "alice"
    assert data["posts"][0]["comments"] == []
    assert "candelete" not in data["posts"][0]


def test_create_post_requires_session(client, db_session, forum) -> None:
    response = client.put(f"{BASE}/F1/posts", json={"title": "t", "content": "c"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert db_session.query(Post).count() == 0


def test_create_post_missing_forum(client, alice_headers) -> None:
    response = client.put(
        f"{BASE}/nope/posts",
        json={"title": "t", "content": "c"},
        headers=alice_headers,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_create_post_unknown_account(client, forum) -> None:
    headers = {"Authorization": f"Bearer {create_access_token('ghost')}"}
    response = client.put(f"{BASE}/F1/posts", json={"title": "t", "content": "c"}, headers=headers)
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["detail"] == "User does not exist"


def test_create_post_invalid_token(client, forum) -> None:
    headers = {"Authorization": "Bearer not-a-token"}
    response = client.put(f"{BASE}/F1/posts", json={"title": "t", "content": "c"}, headers=headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert "Could not validate credentials" in response.json()["detail"]


def test_create_post_empty_title(client, forum, alice_headers) -> None:
    response = client.put(
        f"{BASE}/F1/posts",
        json={"title": "", "content": "c"},
        headers=alice_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_post_as_author_has_candelete(client, alice_post, alice_headers) -> None:
    response = client.get(f"{BASE}/F1/posts/{alice_post.id}", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["title"] == "Hello"
    assert data["candelete"] is True


def test_get_post_as_other_user_has_no_candelete(client, alice_post, bob_headers) -> None:
    response = client.get(f"{BASE}/F1/posts/{alice_post.id}", headers=bob_headers)
    assert response.status_code == status.HTTP_200_OK
    assert "candelete" not in response.json()


def test_get_post_anonymous(client, alice_post) -> None:
    response = client.get(f"{BASE}/F1/posts/{alice_post.id}")
    assert response.status_code == status.HTTP_200_OK
    assert "candelete" not in response.json()


def test_get_missing_post(client, forum) -> None:
    response = client.get(f"{BASE}/F1/posts/12345")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_post_requires_session(client, alice_post) -> None:
    response = client.delete(f"{BASE}/F1/posts/{alice_post.id}")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_delete_post_malformed_id(client, forum, alice_headers) -> None:
    response = client.delete(f"{BASE}/F1/posts/abc", headers=alice_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_delete_post_not_author(client, alice_post, bob_headers) -> None:
    # Viewing the post never hands out rights, whatever the client claims.
    response = client.delete(
        f"{BASE}/F1/posts/{alice_post.id}",
        headers={**bob_headers, "X-Candelete": "true"},
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert len(client.get(f"{BASE}/F1/posts").json()) == 1


def test_delete_post_by_author(client, alice_post, alice_headers) -> None:
    post_id = alice_post.id
    response = client.delete(f"{BASE}/F1/posts/{post_id}", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["detail"] == "Post successfully deleted"

    assert client.get(f"{BASE}/F1/posts").json() == []
    missing = client.get(f"{BASE}/F1/posts/{post_id}")
    assert missing.status_code == status.HTTP_404_NOT_FOUND


def test_store_failure_is_internal_error(client, forum) -> None:
    with patch(
        "agora_forum.repositories.forum_repo.ForumStore.find_by_id",
        side_effect=OperationalError("SELECT 1", {}, Exception("database is locked")),
    ):
        response = client.get(f"{BASE}/F1/posts")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["detail"] == "Internal server error"
