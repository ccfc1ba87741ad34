from unittest import mock

from bookshelf.blueprints.book_tracking import routes as book_tracking_routes
from bookshelf.errors import StorageUnavailable
from bookshelf.models import BookTracking, ReadingListEntry


def test_post_progress(client):
    response = client.post(
        "/api/book-tracking",
        json={"user_id": "u1", "book_id": 42, "current_page": 50, "total_pages": 200},
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["record"]["user_id"] == "u1"
    assert body["record"]["progress_percentage"] == 25.0


def test_post_progress_validation_error(client):
    response = client.post("/api/book-tracking", json={"user_id": "u1", "book_id": 42, "current_page": 0, "total_pages": 5})

    assert response.status_code == 400
    assert response.get_json() == {
        "success": False,
        "error": "book_id, current_page, and total_pages are required positive integers",
    }
    assert BookTracking.query.count() == 0
    assert ReadingListEntry.query.count() == 0


def test_post_progress_invalid_body(client):
    response = client.post("/api/book-tracking", data="not json", content_type="application/json")

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid request body"


def test_post_progress_storage_unavailable(client):
    with mock.patch(
        "bookshelf.repositories.book_tracking_repository.ensure_connection",
        side_effect=StorageUnavailable("Database is not available", details="connection refused"),
    ):
        response = client.post("/api/book-tracking", json={"book_id": 42, "current_page": 1, "total_pages": 2})

    assert response.status_code == 500
    assert response.get_json() == {
        "success": False,
        "error": "Failed to update reading progress",
        "details": "connection refused",
    }


def test_post_progress_survives_reading_list_failure(client):
    repository = book_tracking_routes.book_tracking_service.reading_list_repository
    with mock.patch.object(repository, "sync_from_progress") as sync:
        sync.return_value.ok = False
        sync.return_value.error = RuntimeError("boom")
        response = client.post("/api/book-tracking", json={"book_id": 42, "current_page": 1, "total_pages": 2})

    assert response.status_code == 200
    assert response.get_json()["success"] is True
    assert response.get_json()["record"]["progress_percentage"] == 50.0


def test_get_progress_uses_header_identity(client):
    client.post("/api/book-tracking", json={"user_id": "u1", "book_id": 1, "current_page": 1, "total_pages": 2})
    client.post("/api/book-tracking", json={"user_id": "u2", "book_id": 1, "current_page": 1, "total_pages": 2})

    response = client.get("/api/book-tracking", headers={"X-User-Id": "u1"})

    body = response.get_json()
    assert response.status_code == 200
    assert body["success"] is True
    assert [r["user_id"] for r in body["records"]] == ["u1"]


def test_get_progress_ignores_body_user_id(client):
    client.post("/api/book-tracking", json={"user_id": "u1", "book_id": 1, "current_page": 1, "total_pages": 2})

    response = client.get("/api/book-tracking?bookId=1", json={"user_id": "u1"})

    assert response.get_json()["records"] == []


def test_get_progress_failure(client):
    with mock.patch.object(
        book_tracking_routes.book_tracking_service, "list_progress", side_effect=RuntimeError("no such table")
    ):
        response = client.get("/api/book-tracking")

    assert response.status_code == 500
    assert response.get_json() == {
        "success": False,
        "error": "Failed to fetch reading progress",
        "details": "no such table",
    }


def test_anonymous_rejected_when_disabled(app, client):
    app.config["ALLOW_ANONYMOUS"] = False

    assert client.get("/api/book-tracking").status_code == 401
    response = client.post("/api/book-tracking", json={"book_id": 42, "current_page": 1, "total_pages": 2})
    assert response.status_code == 401
    assert response.get_json() == {"success": False, "error": "Authentication required"}


def test_anonymous_identity_used_when_allowed(client):
    response = client.post("/api/book-tracking", json={"book_id": 42, "current_page": 1, "total_pages": 2})

    assert response.get_json()["record"]["user_id"] == "anonymous"


def test_session_identity_after_register(client):
    response = client.post("/api/auth/register", json={"username": "reader", "password": "secret1"})
    assert response.status_code == 201
    user_id = response.get_json()["user_id"]

    client.post("/api/book-tracking", json={"book_id": 42, "current_page": 1, "total_pages": 2})
    records = client.get("/api/book-tracking").get_json()["records"]

    assert [r["user_id"] for r in records] == [user_id]


def test_reading_list_flow(client):
    client.post("/api/book-tracking", json={"user_id": "u1", "book_id": 42, "current_page": 200, "total_pages": 200})

    items = client.get("/api/reading-list", headers={"X-User-Id": "u1"}).get_json()["items"]
    assert [(i["book_id"], i["status"]) for i in items] == [(42, "completed")]

    response = client.patch("/api/reading-list", json={"user_id": "u1", "id": items[0]["id"], "status": "reading"})
    assert response.get_json()["item"]["status"] == "reading"

    response = client.post("/api/reading-list", json={"user_id": "u1", "bookId": 7})
    assert response.get_json()["item"]["status"] == "to_read"

    response = client.delete("/api/reading-list?bookId=7", headers={"X-User-Id": "u1"})
    assert response.get_json() == {"success": True, "deleted": 1}


def test_reading_list_errors(client):
    response = client.patch("/api/reading-list", json={"user_id": "u1", "id": 99, "status": "reading"})
    assert response.status_code == 404
    assert response.get_json()["error"] == "Reading-list item not found"

    response = client.delete("/api/reading-list", headers={"X-User-Id": "u1"})
    assert response.status_code == 400

    response = client.post("/api/reading-list", json={"user_id": "u1"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "book_id is required"


def test_post_progress_rejects_oversized_ids(client):
    response = client.post(
        "/api/book-tracking",
        json={"user_id": "u1", "book_id": "99999999999999999999", "current_page": 1, "total_pages": 2},
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "book_id, current_page, and total_pages are required positive integers"
    assert BookTracking.query.count() == 0


def test_post_progress_accepts_json_sent_as_text(client):
    response = client.post(
        "/api/book-tracking",
        data='{"user_id": "u1", "book_id": 42, "current_page": 1, "total_pages": 4}',
        content_type="text/plain",
    )

    assert response.status_code == 200
    assert response.get_json()["record"]["progress_percentage"] == 25.0
