# =============================================================================
# tests/test_api.py - HTTP API Tests
# =============================================================================
# End-to-end tests through FastAPI's TestClient against mongomock:
# - Review CRUD and filtering
# - Comment add/update/delete
# - Registration, login and the protected profile route
# - Error bodies and status codes
# =============================================================================

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from core.services import ReviewService


def _create_review(client, **overrides):
    body = {"title": "Good steak", "food": "Ribeye", "content": "Nice", "rating": 9}
    body.update(overrides)
    response = client.post("/reviews", json=body)
    assert response.status_code == 200
    return response.json()


def _register_and_login(client, email="jane@example.com", password="correct horse"):
    created = client.post("/users", json={"email": email, "password": password})
    assert created.status_code == 200
    login = client.post("/login", json={"email": email, "password": password})
    assert login.status_code == 200
    return created.json(), login.json()["accessToken"]


class TestRoot:
    """Tests for informational endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Food Reviews API"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestReviewEndpoints:
    """Tests for /reviews."""

    def test_end_to_end(self, client):
        created = _create_review(client)
        review_id = created["id"]
        assert ObjectId.is_valid(review_id)
        assert created["review"]["title"] == "Good steak"

        listed = client.get("/reviews", params={"min_rating": "8"}).json()
        assert review_id in [r["id"] for r in listed]

        updated = client.put(f"/reviews/{review_id}", json={"rating": 10})
        assert updated.status_code == 200

        fetched = client.get(f"/reviews/{review_id}").json()
        assert fetched["rating"] == 10
        assert fetched["title"] == "Good steak"

    def test_list_filters(self, client):
        _create_review(client, title="Good steak", rating=9)
        _create_review(client, title="Cheap STEAK", rating=3)
        _create_review(client, title="Chicken rice", rating=8)

        by_title = client.get("/reviews", params={"title": "steak"}).json()
        by_rating = client.get("/reviews", params={"min_rating": "7"}).json()

        assert [r["title"] for r in by_title] == ["Good steak", "Cheap STEAK"]
        assert [r["title"] for r in by_rating] == ["Good steak", "Chicken rice"]

    def test_list_omits_comments(self, client):
        review_id = _create_review(client)["id"]
        client.post(f"/reviews/{review_id}/comments", json={"content": "Yum", "nickname": "a"})

        listed = client.get("/reviews").json()

        assert "comments" not in listed[0]

    def test_invalid_min_rating(self, client):
        response = client.get("/reviews", params={"min_rating": "lots"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_QUERY_PARAMETER"
        assert "min_rating" in body["error"]

    def test_min_rating_too_large(self, client):
        response = client.get("/reviews", params={"min_rating": "9" * 30})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_QUERY_PARAMETER"

    def test_get_unknown_review(self, client):
        response = client.get(f"/reviews/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["code"] == "REVIEW_NOT_FOUND"

    def test_get_malformed_id_is_not_found(self, client):
        assert client.get("/reviews/not-an-id").status_code == 404

    def test_sparse_put_ignores_falsy(self, client):
        review_id = _create_review(client)["id"]

        response = client.put(f"/reviews/{review_id}", json={"title": "", "food": "Wagyu", "rating": 0})

        body = response.json()
        assert body["title"] == "Good steak"
        assert body["food"] == "Wagyu"
        assert body["rating"] == 9

    def test_create_validation_error(self, client):
        response = client.post("/reviews", json={"title": "No rating"})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_delete(self, client):
        review_id = _create_review(client)["id"]

        response = client.delete(f"/reviews/{review_id}")

        assert response.status_code == 200
        assert response.json()["id"] == review_id
        assert client.get(f"/reviews/{review_id}").status_code == 404
        assert client.delete(f"/reviews/{review_id}").status_code == 404


class TestCommentEndpoints:
    """Tests for comment routes."""

    def test_comment_lifecycle(self, client):
        review_id = _create_review(client)["id"]

        added = client.post(
            f"/reviews/{review_id}/comments",
            json={"content": "Agreed", "nickname": "meatlover"},
        )
        assert added.status_code == 200
        comment_id = added.json()["comment"]["id"]

        comments = client.get(f"/reviews/{review_id}").json()["comments"]
        assert comments[-1] == {"id": comment_id, "content": "Agreed", "nickname": "meatlover"}

        updated = client.put(f"/comments/{comment_id}", json={"content": "Still agreed", "nickname": "ml"})
        assert updated.status_code == 200
        assert updated.json()["modified_count"] == 1

        comments = client.get(f"/reviews/{review_id}").json()["comments"]
        assert comments == [{"id": comment_id, "content": "Still agreed", "nickname": "ml"}]

        deleted = client.delete(f"/comments/{comment_id}")
        assert deleted.status_code == 200
        assert client.get(f"/reviews/{review_id}").json()["comments"] == []

    def test_comment_on_unknown_review(self, client):
        response = client.post(
            f"/reviews/{ObjectId()}/comments",
            json={"content": "Hello?", "nickname": "ghost"},
        )

        assert response.status_code == 404

    def test_update_unknown_comment(self, client):
        response = client.put(f"/comments/{ObjectId()}", json={"content": "x", "nickname": "y"})

        assert response.status_code == 404
        assert response.json()["code"] == "COMMENT_NOT_FOUND"

    def test_delete_unknown_comment(self, client):
        review_id = _create_review(client)["id"]
        client.post(f"/reviews/{review_id}/comments", json={"content": "keep", "nickname": "a"})
        before = client.get(f"/reviews/{review_id}").json()

        response = client.delete(f"/comments/{ObjectId()}")

        assert response.status_code == 404
        assert client.get(f"/reviews/{review_id}").json() == before


class TestAuthEndpoints:
    """Tests for /users, /login and /user/{id}."""

    def test_register_hides_password(self, client):
        response = client.post("/users", json={"email": "jane@example.com", "password": "correct horse"})

        assert response.status_code == 200
        assert set(response.json()) == {"id", "email"}

    def test_register_rejects_password_over_72_bytes(self, client):
        response = client.post("/users", json={"email": "jane@example.com", "password": "\u00e9" * 72})

        assert response.status_code == 422

    def test_register_duplicate(self, client):
        _register_and_login(client)

        response = client.post("/users", json={"email": "jane@example.com", "password": "something else"})

        assert response.status_code == 409

    def test_login_wrong_password(self, client):
        _register_and_login(client)

        response = client.post("/login", json={"email": "jane@example.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_profile_with_valid_token(self, client, clock):
        user, token = _register_and_login(client)

        response = client.get(f"/user/{user['id']}", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == user["id"]
        assert body["email"] == "jane@example.com"

    def test_profile_without_header(self, client):
        response = client.get(f"/user/{ObjectId()}")

        assert response.status_code == 403
        assert response.json()["code"] == "MISSING_CREDENTIAL"

    def test_profile_with_non_bearer_scheme(self, client):
        response = client.get(f"/user/{ObjectId()}", headers={"Authorization": "Basic abc"})

        assert response.status_code == 403
        assert response.json()["code"] == "MISSING_CREDENTIAL"

    def test_profile_with_invalid_token(self, client):
        response = client.get(f"/user/{ObjectId()}", headers={"Authorization": "Bearer abc.def.ghi"})

        assert response.status_code == 403
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_profile_with_expired_token(self, client, clock):
        user, token = _register_and_login(client)
        clock.advance(hours=1, seconds=1)

        response = client.get(f"/user/{user['id']}", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403
        assert response.json()["code"] == "INVALID_TOKEN"


# =============================================================================
# Datastore Failures
# =============================================================================

class TestDatastoreErrors:
    """Driver errors become a generic 500 without leaking driver text."""

    def test_list_when_database_unreachable(self, client, monkeypatch):
        def unreachable(self, review_filter=None):
            raise ServerSelectionTimeoutError("db host unreachable")

        monkeypatch.setattr(ReviewService, "list_reviews", unreachable)

        response = client.get("/reviews")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "INTERNAL_ERROR"
        assert "error" in body
        assert "unreachable" not in response.text

    def test_get_when_database_unreachable(self, client, monkeypatch):
        review = _create_review(client)

        def unreachable(self, review_id):
            raise ServerSelectionTimeoutError("db host unreachable")

        monkeypatch.setattr(ReviewService, "get_review", unreachable)

        response = client.get(f"/reviews/{review['id']}")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"
