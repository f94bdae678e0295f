from __future__ import annotations

from datetime import UTC, datetime

import pytest
from loguru import logger

from bloglist.domain.users.entities import User
from bloglist.domain.users.exceptions import UserAlreadyExistsError
from bloglist.infrastructure.db import reset_schema
from bloglist.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)


@pytest.fixture()
def users():
    reset_schema()
    yield SqlAlchemyUserRepository()
    reset_schema()


def _user(username: str) -> User:
    return User(
        id=0,
        username=username,
        name=username.title(),
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


@pytest.fixture()
def captured_levels():
    levels: list[str] = []
    sink_id = logger.add(lambda message: levels.append(message.record["level"].name), level="DEBUG")
    yield levels
    logger.remove(sink_id)


def test_resolved_token_is_timezone_aware_and_live(users) -> None:
    owner = users.add(_user("adp10390"))
    tokens = SqlAlchemySessionTokenRepository(ttl_seconds=3600)
    issued = tokens.issue_for_user(owner.id)

    resolved = tokens.resolve(issued.token)

    assert resolved is not None
    assert resolved.user_id == owner.id
    assert resolved.expires_at.tzinfo is not None
    assert not resolved.is_expired()


def test_loaded_user_created_at_is_timezone_aware(users) -> None:
    owner = users.add(_user("adp10390"))

    assert users.find_by_id(owner.id).created_at.tzinfo is not None


def test_duplicate_username_is_conflict_without_error_log(users, captured_levels) -> None:
    users.add(_user("adp10390"))

    with pytest.raises(UserAlreadyExistsError):
        users.add(_user("adp10390"))

    assert "ERROR" not in captured_levels
    assert len(users.list_all()) == 1
