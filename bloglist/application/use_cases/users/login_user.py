# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from bloglist.domain.users.entities import User
from bloglist.domain.users.exceptions import WrongCredentialsError
from bloglist.domain.users.repositories import (
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: str
    user: User


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> LoginResult:
        user = self._users.find_by_username(username)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise WrongCredentialsError()

        token = self._tokens.issue_for_user(user.id)
        return LoginResult(token=token.token, user=user)
