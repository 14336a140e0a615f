"""End-to-end tests for the HTTP API over in-memory storage."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from tests.di import build_test_container

THREAD = {
    "forum": "forum1",
    "title": "Thread With Sufficiently Large Title",
    "isClosed": False,
    "user": "user1@mail.ru",
    "date": "2014-01-01 00:00:01",
    "message": "hey hey hey hey!",
    "slug": "Threadwithsufficientlylargetitle",
    "isDeleted": False,
}


@pytest.fixture
def client():
    app = create_app(container=build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def _create_thread(client: TestClient) -> int:
    response = client.post("/db/api/thread/create/", json=THREAD)
    assert response.status_code == 200
    return response.json()["response"]["id"]


def _create_post(
    client: TestClient, thread_id: int, parent: int | None = None, second: int = 1
) -> dict:
    payload = {
        "thread": thread_id,
        "forum": "forum1",
        "user": "user1@mail.ru",
        "message": "my message",
        "date": f"2014-01-01 00:00:{second:02d}",
        "parent": parent,
    }
    response = client.post("/db/api/post/create/", json=payload)
    assert response.status_code == 200
    return response.json()["response"]


class TestPostFlow:
    """Creating and reading posts through the API."""

    def test_create_post_envelope(self, client):
        """Replies carry their path and the thread counter follows."""
        # Arrange
        thread_id = _create_thread(client)

        # Act
        root = _create_post(client, thread_id)
        reply = _create_post(client, thread_id, parent=root["id"], second=2)

        # Assert
        assert root["first_path"] == root["id"]
        assert root["last_path"] == ""
        assert reply["first_path"] == root["id"]
        assert reply["last_path"] == f".{reply['id']:03d}"
        assert reply["isDeleted"] is False
        assert reply["date"] == "2014-01-01 00:00:02"

        details = client.get("/db/api/thread/details/", params={"thread": thread_id})
        assert details.json()["code"] == 0
        assert details.json()["response"]["posts"] == 2

    def test_missing_post_is_code_1(self, client):
        """Unknown ids answer 404 with code 1."""
        response = client.get("/db/api/post/details/", params={"post": 42})

        assert response.status_code == 404
        assert response.json()["code"] == 1

    def test_missing_parent_is_code_1(self, client):
        """A reply to an unknown post is a not-found error."""
        thread_id = _create_thread(client)

        response = client.post(
            "/db/api/post/create/",
            json={
                "thread": thread_id,
                "forum": "forum1",
                "user": "user1@mail.ru",
                "message": "orphan",
                "date": "2014-01-01 00:00:01",
                "parent": 77,
            },
        )

        assert response.status_code == 404
        assert response.json()["code"] == 1

    def test_invalid_body_is_code_3(self, client):
        """Missing required fields answer 400 with code 3."""
        response = client.post("/db/api/post/create/", json={"thread": 1})

        assert response.status_code == 400
        assert response.json()["code"] == 3

    def test_remove_and_restore_echo_id(self, client):
        """Remove and restore answer with the post id."""
        thread_id = _create_thread(client)
        post = _create_post(client, thread_id)

        removed = client.post("/db/api/post/remove/", json={"post": post["id"]})
        restored = client.post("/db/api/post/restore/", json={"post": post["id"]})

        assert removed.json() == {"code": 0, "response": {"post": post["id"]}}
        assert restored.json() == {"code": 0, "response": {"post": post["id"]}}

    def test_vote(self, client):
        """Votes move likes and points."""
        thread_id = _create_thread(client)
        post = _create_post(client, thread_id)

        response = client.post(
            "/db/api/post/vote/", json={"post": post["id"], "vote": 1}
        )

        body = response.json()["response"]
        assert (body["likes"], body["dislikes"], body["points"]) == (1, 0, 1)


class TestListPosts:
    """Thread post listings through /thread/listPosts/."""

    def _seed(self, client: TestClient) -> tuple[int, dict[str, int]]:
        thread_id = _create_thread(client)
        a = _create_post(client, thread_id, second=1)["id"]
        a1 = _create_post(client, thread_id, parent=a, second=5)["id"]
        b = _create_post(client, thread_id, second=2)["id"]
        b1 = _create_post(client, thread_id, parent=b, second=3)["id"]
        return thread_id, {"a": a, "a1": a1, "b": b, "b1": b1}

    def _list(self, client: TestClient, **params) -> list[int]:
        response = client.get("/db/api/thread/listPosts/", params=params)
        assert response.status_code == 200
        assert response.json()["code"] == 0
        return [p["id"] for p in response.json()["response"]]

    def test_tree_desc(self, client):
        """Roots newest first, replies under their root."""
        thread_id, ids = self._seed(client)

        result = self._list(client, thread=thread_id, sort="tree", order="desc")

        assert result == [ids["b"], ids["b1"], ids["a"], ids["a1"]]

    def test_parent_tree_limit(self, client):
        """The limit counts root trees."""
        thread_id, ids = self._seed(client)

        result = self._list(
            client, thread=thread_id, sort="parent_tree", order="asc", limit="1"
        )

        assert result == [ids["a"], ids["a1"]]

    def test_flat_with_bad_limit(self, client):
        """A non-numeric limit yields an empty listing."""
        thread_id, _ = self._seed(client)

        assert self._list(client, thread=thread_id, limit="abc") == []

    def test_flat_since(self, client):
        """since filters by date in flat mode."""
        thread_id, ids = self._seed(client)

        result = self._list(
            client, thread=thread_id, order="asc", since="2014-01-01 00:00:03"
        )

        assert result == [ids["b1"], ids["a1"]]

    def test_unknown_sort_is_code_3(self, client):
        """Invalid query parameters answer 400 with code 3."""
        thread_id, _ = self._seed(client)

        response = client.get(
            "/db/api/thread/listPosts/", params={"thread": thread_id, "sort": "x"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == 3


class TestThreadAndStore:
    """Thread commands and store maintenance."""

    def test_remove_thread_cascades(self, client):
        """Removing a thread hides its posts and zeroes the counter."""
        thread_id = _create_thread(client)
        post = _create_post(client, thread_id)

        response = client.post("/db/api/thread/remove/", json={"thread": thread_id})

        assert response.json() == {"code": 0, "response": {"thread": thread_id}}
        details = client.get("/db/api/post/details/", params={"post": post["id"]})
        assert details.json()["response"]["isDeleted"] is True
        thread = client.get("/db/api/thread/details/", params={"thread": thread_id})
        assert thread.json()["response"]["posts"] == 0

    def test_close_and_open(self, client):
        """Close and open echo the thread id."""
        thread_id = _create_thread(client)

        closed = client.post("/db/api/thread/close/", json={"thread": thread_id})
        assert closed.json()["response"] == {"thread": thread_id}
        details = client.get("/db/api/thread/details/", params={"thread": thread_id})
        assert details.json()["response"]["isClosed"] is True

        client.post("/db/api/thread/open/", json={"thread": thread_id})
        details = client.get("/db/api/thread/details/", params={"thread": thread_id})
        assert details.json()["response"]["isClosed"] is False

    def test_status_and_clear(self, client):
        """Clear empties the store and answers OK."""
        thread_id = _create_thread(client)
        _create_post(client, thread_id)

        status = client.get("/db/api/status/")
        assert status.json()["response"] == {"thread": 1, "post": 1}

        cleared = client.post("/db/api/clear/")
        assert cleared.json() == {"code": 0, "response": "OK"}

        status = client.get("/db/api/status/")
        assert status.json()["response"] == {"thread": 0, "post": 0}

    def test_health(self, client):
        """Health check reports status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestDateNormalization:
    """Offset-aware dates are stored and compared as naive UTC."""

    def test_aware_since_filters(self, client):
        """A since with a UTC designator filters like its naive equivalent."""
        thread_id = _create_thread(client)
        post = _create_post(client, thread_id, second=1)

        response = client.get(
            "/db/api/thread/listPosts/",
            params={"thread": thread_id, "since": "2014-01-01T00:00:00Z"},
        )

        assert response.status_code == 200
        assert [p["id"] for p in response.json()["response"]] == [post["id"]]

    def test_aware_post_date_mixes_with_naive(self, client):
        """An offset date is shifted to UTC and sorts with naive dates."""
        thread_id = _create_thread(client)
        naive = _create_post(client, thread_id, second=1)
        response = client.post(
            "/db/api/post/create/",
            json={
                "thread": thread_id,
                "forum": "forum1",
                "user": "user1@mail.ru",
                "message": "from +03:00",
                "date": "2014-01-01T00:00:02+03:00",
            },
        )
        assert response.status_code == 200
        aware = response.json()["response"]
        assert aware["date"] == "2013-12-31 21:00:02"

        listing = client.get(
            "/db/api/thread/listPosts/", params={"thread": thread_id, "order": "asc"}
        )

        assert listing.status_code == 200
        assert [p["id"] for p in listing.json()["response"]] == [
            aware["id"],
            naive["id"],
        ]

    def test_aware_thread_date(self, client):
        """Thread dates are normalized the same way."""
        response = client.post(
            "/db/api/thread/create/",
            json={**THREAD, "date": "2014-01-01T05:00:00+05:00"},
        )

        assert response.status_code == 200
        assert response.json()["response"]["date"] == "2014-01-01 00:00:00"

    def test_huge_limit_is_capped(self, client):
        """A limit beyond the database range lists everything."""
        thread_id = _create_thread(client)
        _create_post(client, thread_id, second=1)
        _create_post(client, thread_id, second=2)

        response = client.get(
            "/db/api/thread/listPosts/",
            params={"thread": thread_id, "limit": "99999999999999999999"},
        )

        assert response.status_code == 200
        assert len(response.json()["response"]) == 2
