# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from bloglist.domain.exceptions import InvariantViolation
from bloglist.domain.users.entities import User
from bloglist.domain.users.exceptions import UserAlreadyExistsError
from bloglist.domain.users.repositories import PasswordHasher, UserRepository
from bloglist.shared.logging import logger


class RegisterUserUseCase:
    """Creates an account. Any non-empty password is accepted."""

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, name: str, password: str) -> User:
        username = username.strip()
        if not password:
            raise InvariantViolation("password must not be empty", field="password")
        if self._users.find_by_username(username) is not None:
            raise UserAlreadyExistsError(context={"username": username})

        # the repository raises UserAlreadyExistsError too if a concurrent insert wins
        persisted = self._users.add(
            User(
                id=0,
                username=username,
                name=name.strip(),
                password_hash=self._password_hasher.hash(password),
                created_at=datetime.now(UTC),
            )
        )
        logger.info(f"users.register: ok user_id={persisted.id} username={persisted.username}")
        return persisted
