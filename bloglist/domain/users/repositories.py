# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .entities import SessionToken, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def find_many(self, user_ids: Iterable[int]) -> dict[int, User]: ...
    def list_all(self) -> Sequence[User]: ...
    def add(self, user: User) -> User: ...
    def clear(self) -> None: ...


class SessionTokenRepository(Protocol):
    def issue_for_user(self, user_id: int) -> SessionToken: ...
    def resolve(self, token: str) -> SessionToken | None: ...
    def revoke(self, token: str) -> None: ...
    def clear(self) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
