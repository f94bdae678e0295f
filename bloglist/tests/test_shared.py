from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask import Flask, jsonify
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from bloglist.interfaces.http.controllers.testing_controller import TestingController
from bloglist.shared.config.settings import AppConfig
from bloglist.shared.errors import ValidationError
from bloglist.shared.errors.validation import format_pydantic_errors, raise_validation_error
from bloglist.shared.logging import sanitize_message
from bloglist.shared.middleware.error_handler import configure_error_handling
from bloglist.shared.middleware.rate_limit import SlidingWindowLimiter, rate_limit


@pytest.mark.parametrize(
    ("raw", "leak"),
    [
        ("Authorization: Bearer abcDEF123_-xyz.789", "abcDEF123_-xyz.789"),
        ("payload={'username': 'adp10390', 'password': 'weakpassword'}", "weakpassword"),
        ('{"token": "Zk3lq0-9aa8bbCC"}', "Zk3lq0-9aa8bbCC"),
        ("postgresql+psycopg://bloglist:s3cr3t@db:5432/bloglist", "s3cr3t"),
    ],
)
def test_sanitize_message_hides_credentials(raw: str, leak: str) -> None:
    assert leak not in sanitize_message(raw)


def test_sanitize_message_keeps_ordinary_text() -> None:
    line = "blogs.create: ok blog_id=4 owner_id=2"
    assert sanitize_message(line) == line


def test_limiter_blocks_after_limit_within_window() -> None:
    limiter = SlidingWindowLimiter(limit=2, window_seconds=10)

    assert limiter.hit("ip", now=0.0) == 0
    assert limiter.hit("ip", now=1.0) == 0
    assert limiter.hit("ip", now=2.0) == pytest.approx(8.0)
    assert limiter.hit("other", now=2.0) == 0


def test_limiter_frees_slots_as_window_slides() -> None:
    limiter = SlidingWindowLimiter(limit=1, window_seconds=5)

    assert limiter.hit("ip", now=0.0) == 0
    assert limiter.hit("ip", now=4.0) > 0
    assert limiter.hit("ip", now=5.0) == 0


class _Payload(BaseModel):
    title: str = Field(min_length=1)
    url: str


def test_validation_errors_are_grouped_per_field() -> None:
    with pytest.raises(PydanticValidationError) as caught:
        _Payload.model_validate({"title": ""})

    formatted = format_pydantic_errors(caught.value)

    assert formatted["fields"] == ["title", "url"]
    assert [item["field"] for item in formatted["errors"]] == ["title", "url"]


def test_raise_validation_error_carries_first_message() -> None:
    with pytest.raises(PydanticValidationError) as caught:
        _Payload.model_validate({"title": "ok"})

    with pytest.raises(ValidationError) as converted:
        raise_validation_error(caught.value)

    payload = converted.value.to_dict()
    assert payload["error"] == "invalid_input"
    assert payload["message"].startswith("url: ")


def test_rate_limit_defaults_off_in_test_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("ENABLE_RATE_LIMIT", raising=False)

    assert AppConfig().security.enable_rate_limit is False


def test_rate_limit_explicit_setting_wins_in_test_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("ENABLE_RATE_LIMIT", "1")

    assert AppConfig().security.enable_rate_limit is True


def test_rate_limit_defaults_on_outside_tests(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.delenv("ENABLE_RATE_LIMIT", raising=False)

    assert AppConfig().security.enable_rate_limit is True


def test_testing_reset_clears_login_limits() -> None:
    app = Flask(__name__)
    configure_error_handling(app)
    app.register_blueprint(TestingController(reset_use_case=MagicMock()).as_blueprint())

    @app.post("/api/limited")
    @rate_limit(limit=1, window_seconds=60, enabled=True)
    def limited():
        return jsonify({"ok": True})

    with app.test_client() as client:
        assert client.post("/api/limited").status_code == 200
        blocked = client.post("/api/limited")
        assert blocked.status_code == 429
        assert int(blocked.headers["Retry-After"]) >= 1

        assert client.post("/api/testing/reset").status_code == 204

        assert client.post("/api/limited").status_code == 200
