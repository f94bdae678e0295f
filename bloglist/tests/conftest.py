from __future__ import annotations

import itertools
import os
import tempfile
import threading
from collections.abc import Iterable, Sequence
from contextlib import AbstractContextManager
from dataclasses import replace
from datetime import UTC, datetime, timedelta

_DB_DIR = tempfile.mkdtemp(prefix="bloglist-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from bloglist.domain.blogs.entities import BlogDraft, BlogEntry  # noqa: E402
from bloglist.domain.users.entities import SessionToken, User  # noqa: E402
from bloglist.domain.users.repositories import (  # noqa: E402
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)
from bloglist.infrastructure.locks import EntryLocks  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_many(self, user_ids: Iterable[int]) -> dict[int, User]:
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    def list_all(self) -> Sequence[User]:
        return list(self._users.values())

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def remove(self, user_id: int) -> None:
        self._users.pop(user_id, None)

    def clear(self) -> None:
        self._users.clear()


class InMemoryTokenRepository(SessionTokenRepository):
    def __init__(self) -> None:
        self._tokens: dict[str, SessionToken] = {}
        self._seq = itertools.count(1)

    def issue_for_user(self, user_id: int) -> SessionToken:
        token = SessionToken(
            user_id=user_id,
            token=f"token-{next(self._seq)}",
            expires_at=datetime.now(UTC) + timedelta(days=7),
        )
        self._tokens[token.token] = token
        return token

    def resolve(self, token: str) -> SessionToken | None:
        found = self._tokens.get(token)
        if found is None or found.is_expired():
            return None
        return found

    def revoke(self, token: str) -> None:
        self._tokens.pop(token, None)

    def expire(self, token: str) -> None:
        self._tokens[token] = replace(
            self._tokens[token], expires_at=datetime.now(UTC) - timedelta(seconds=1)
        )

    def clear(self) -> None:
        self._tokens.clear()


class InMemoryBlogRepository:
    def __init__(self) -> None:
        self._entries: dict[int, BlogEntry] = {}
        self._ids = itertools.count(1)
        self.locks = EntryLocks()
        self._guard = threading.Lock()

    def lock(self, blog_id: int) -> AbstractContextManager[None]:
        return self.locks.hold(blog_id)

    def add(self, draft: BlogDraft) -> BlogEntry:
        with self._guard:
            blog_id = next(self._ids)
            entry = BlogEntry(
                id=blog_id,
                title=draft.title,
                author=draft.author,
                url=draft.url,
                likes=0,
                owner_id=draft.owner_id,
                sequence=blog_id,
                created_at=datetime.now(UTC),
            )
            self._entries[blog_id] = entry
            return entry

    def find_by_id(self, blog_id: int) -> BlogEntry | None:
        with self._guard:
            return self._entries.get(blog_id)

    def increment_likes(self, blog_id: int) -> BlogEntry | None:
        with self._guard:
            entry = self._entries.get(blog_id)
            if entry is None:
                return None
            updated = entry.liked()
            self._entries[blog_id] = updated
            return updated

    def remove(self, blog_id: int) -> bool:
        with self._guard:
            return self._entries.pop(blog_id, None) is not None

    def list_all(self) -> Sequence[BlogEntry]:
        with self._guard:
            return list(self._entries.values())

    def clear(self) -> None:
        with self._guard:
            self._entries.clear()


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> InMemoryTokenRepository:
    return InMemoryTokenRepository()


@pytest.fixture()
def blogs() -> InMemoryBlogRepository:
    return InMemoryBlogRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


def make_user(users: InMemoryUserRepository, username: str, name: str = "") -> User:
    return users.add(
        User(
            id=0,
            username=username,
            name=name or username.title(),
            password_hash=f"hashed:{username}-pw",
            created_at=datetime.now(UTC),
        )
    )


@pytest.fixture()
def make_owner(users: InMemoryUserRepository):
    def _make(username: str, name: str = "") -> User:
        return make_user(users, username, name)

    return _make
