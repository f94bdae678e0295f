"""Use-case wiping all persisted state between end-to-end test runs."""

from __future__ import annotations

from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.domain.users.repositories import SessionTokenRepository, UserRepository
from bloglist.shared.logging import logger


class ResetStateUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        blogs: BlogRepository,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._blogs = blogs

    def execute(self) -> None:
        self._tokens.clear()
        self._blogs.clear()
        self._users.clear()
        logger.warning("testing.reset: all users, sessions and blogs removed")
