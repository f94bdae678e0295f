"""Use-case for ending a single bearer session."""

from __future__ import annotations

from bloglist.domain.users.repositories import SessionTokenRepository
from bloglist.shared.logging import logger


class LogoutUserUseCase:
    """Revokes only the presented token; the user's other sessions stay valid."""

    def __init__(self, *, tokens: SessionTokenRepository) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> None:
        if not token:
            logger.debug("auth.logout: no token presented, nothing to revoke")
            return
        self._tokens.revoke(token)
