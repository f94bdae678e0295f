from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from flask import Flask

from bloglist.application.use_cases.blogs.details import BlogDetails
from bloglist.domain.blogs.entities import BlogEntry
from bloglist.domain.blogs.exceptions import BlogNotFoundError, ForbiddenError
from bloglist.domain.users.entities import User
from bloglist.interfaces.http.controllers.blogs_controller import BlogsController
from bloglist.shared.errors import UnauthenticatedError
from bloglist.shared.middleware.error_handler import configure_error_handling

OWNER = User(id=7, username="writer", name="Writer", password_hash="h", created_at=datetime.now(UTC))
AUTH = {"Authorization": "Bearer good-token"}


def _details(likes: int = 0) -> BlogDetails:
    entry = BlogEntry(
        id=3,
        title="Canonical string reduction",
        author="Edsger W. Dijkstra",
        url="http://www.cs.utexas.edu/~EWD/",
        likes=likes,
        owner_id=OWNER.id,
        sequence=1,
        created_at=datetime.now(UTC),
    )
    return BlogDetails(entry=entry, owner=OWNER)


class StubResolver:
    def execute(self, token: str | None) -> User:
        if token != "good-token":
            raise UnauthenticatedError()
        return OWNER


@pytest.fixture()
def use_cases() -> dict[str, MagicMock]:
    return {
        "list_use_case": MagicMock(),
        "get_use_case": MagicMock(),
        "create_use_case": MagicMock(),
        "like_use_case": MagicMock(),
        "delete_use_case": MagicMock(),
    }


@pytest.fixture()
def client(use_cases: dict[str, MagicMock]):
    app = Flask(__name__)
    configure_error_handling(app)
    controller = BlogsController(session_resolver=StubResolver(), **use_cases)
    app.register_blueprint(controller.as_blueprint())
    with app.test_client() as test_client:
        yield test_client


def test_list_is_public_and_serializes_owner(client, use_cases) -> None:
    use_cases["list_use_case"].execute.return_value = [_details(likes=5)]

    response = client.get("/api/blogs")

    assert response.status_code == 200
    assert response.get_json() == [
        {
            "id": 3,
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.cs.utexas.edu/~EWD/",
            "likes": 5,
            "user": {"id": 7, "username": "writer", "name": "Writer"},
        }
    ]


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer bad-token"}, {"Authorization": "Basic x"}])
def test_create_requires_bearer_token(client, use_cases, headers) -> None:
    response = client.post("/api/blogs", json={"title": "t", "author": "a", "url": "u"}, headers=headers)

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthenticated"}
    use_cases["create_use_case"].execute.assert_not_called()


def test_create_passes_resolved_owner(client, use_cases) -> None:
    use_cases["create_use_case"].execute.return_value = _details()

    response = client.post(
        "/api/blogs",
        json={"title": "Canonical string reduction", "author": "Edsger W. Dijkstra", "url": "http://x"},
        headers=AUTH,
    )

    assert response.status_code == 201
    assert response.get_json()["likes"] == 0
    use_cases["create_use_case"].execute.assert_called_once_with(
        OWNER.id, "Canonical string reduction", "Edsger W. Dijkstra", "http://x"
    )


def test_create_with_missing_field_is_invalid_input(client, use_cases) -> None:
    response = client.post("/api/blogs", json={"title": "t", "author": "a"}, headers=AUTH)

    assert response.status_code == 400
    assert response.get_json()["error"] == "invalid_input"
    use_cases["create_use_case"].execute.assert_not_called()


def test_like_ignores_body_and_returns_updated_blog(client, use_cases) -> None:
    use_cases["like_use_case"].execute.return_value = _details(likes=1)

    response = client.put("/api/blogs/3", json={"likes": 100}, headers=AUTH)

    assert response.status_code == 200
    assert response.get_json()["likes"] == 1
    use_cases["like_use_case"].execute.assert_called_once_with(3)


def test_like_missing_blog_is_404(client, use_cases) -> None:
    use_cases["like_use_case"].execute.side_effect = BlogNotFoundError(3)

    response = client.put("/api/blogs/3", headers=AUTH)

    assert response.status_code == 404
    assert response.get_json()["error"] == "blog_not_found"


def test_delete_by_owner_returns_204(client, use_cases) -> None:
    response = client.delete("/api/blogs/3", headers=AUTH)

    assert response.status_code == 204
    use_cases["delete_use_case"].execute.assert_called_once_with(3, OWNER.id)


def test_delete_by_other_user_returns_403(client, use_cases) -> None:
    use_cases["delete_use_case"].execute.side_effect = ForbiddenError(3)

    response = client.delete("/api/blogs/3", headers=AUTH)

    assert response.status_code == 403
    assert response.get_json()["error"] == "forbidden"


def test_get_missing_blog_is_404(client, use_cases) -> None:
    use_cases["get_use_case"].execute.side_effect = BlogNotFoundError(42)

    response = client.get("/api/blogs/42")

    assert response.status_code == 404
