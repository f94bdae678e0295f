# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from bloglist.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:
    id: int
    username: str
    name: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.username.strip():
            raise InvariantViolation("username must not be empty", field="username")
        if not self.name.strip():
            raise InvariantViolation("name must not be empty", field="name")


@dataclass(slots=True, frozen=True)
class SessionToken:
    """Opaque bearer token. Resolves to ``user_id`` until ``expires_at``."""

    user_id: int
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at <= (now or datetime.now(UTC))
