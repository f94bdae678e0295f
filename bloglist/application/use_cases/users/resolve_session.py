# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case turning a bearer token back into the user it was issued to."""

from __future__ import annotations

from bloglist.domain.users.entities import User
from bloglist.domain.users.repositories import SessionTokenRepository, UserRepository
from bloglist.shared.errors.base import UnauthenticatedError


class ResolveSessionUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
    ) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str | None) -> User:
        if not token:
            raise UnauthenticatedError()
        session = self._tokens.resolve(token)
        if session is None:
            raise UnauthenticatedError()
        user = self._users.find_by_id(session.user_id)
        if user is None:
            raise UnauthenticatedError()
        return user
