# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from bloglist.domain.users.entities import SessionToken as DomainSessionToken
from bloglist.domain.users.entities import User as DomainUser
from bloglist.domain.users.exceptions import UserAlreadyExistsError
from bloglist.domain.users.repositories import SessionTokenRepository, UserRepository
from bloglist.infrastructure.db.models import SessionToken, User, token_default_exp
from bloglist.infrastructure.db.session import session_scope
from bloglist.shared.logging import logger


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        name=row.name,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def find_many(self, user_ids: Iterable[int]) -> dict[int, DomainUser]:
        ids = set(user_ids)
        if not ids:
            return {}
        with session_scope() as session:
            rows = session.scalars(select(User).where(User.id.in_(ids))).all()
            return {row.id: _to_domain(row) for row in rows}

    def list_all(self) -> Sequence[DomainUser]:
        with session_scope() as session:
            rows = session.scalars(select(User).order_by(User.id)).all()
            return [_to_domain(row) for row in rows]

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    name=user.name,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError(context={"username": user.username}) from exc

    def clear(self) -> None:
        with session_scope() as session:
            session.execute(delete(User))


class SqlAlchemySessionTokenRepository(SessionTokenRepository):
    def __init__(self, ttl_seconds: int) -> None:
        self._ttl_seconds = ttl_seconds

    def issue_for_user(self, user_id: int) -> DomainSessionToken:
        with session_scope() as session:
            token_value = secrets.token_urlsafe(48)
            expires_at = token_default_exp(self._ttl_seconds)
            row = SessionToken(user_id=user_id, token=token_value, expires_at=expires_at)
            session.add(row)
            logger.info(f"tokens.issue: user={user_id} exp={expires_at.isoformat()} tok={token_value[:8]}…")
            return DomainSessionToken(user_id=user_id, token=token_value, expires_at=expires_at)

    def resolve(self, token: str) -> DomainSessionToken | None:
        with session_scope() as session:
            row = (
                session.query(SessionToken)
                .filter(
                    SessionToken.token == token,
                    SessionToken.expires_at > datetime.now(UTC),
                )
                .first()
            )
            if not row:
                return None
            return DomainSessionToken(
                user_id=row.user_id, token=row.token, expires_at=_as_utc(row.expires_at)
            )

    def revoke(self, token: str) -> None:
        with session_scope() as session:
            session.query(SessionToken).filter(SessionToken.token == token).delete()

    def clear(self) -> None:
        with session_scope() as session:
            session.execute(delete(SessionToken))
