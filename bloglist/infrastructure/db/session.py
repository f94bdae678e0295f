# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Engine, scoped sessions and schema management."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from bloglist.shared.config import load_config
from bloglist.shared.config.settings import DatabaseConfig
from bloglist.shared.logging import logger

SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    # blogs.user_id and session_tokens.user_id rely on enforced foreign keys
    "PRAGMA foreign_keys=ON;",
    "PRAGMA busy_timeout=30000;",
)


class Base(DeclarativeBase):
    pass


def _engine_options(db: DatabaseConfig) -> dict[str, Any]:
    options: dict[str, Any] = {"pool_pre_ping": True}
    if db.url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False, "timeout": int(db.pool_timeout)}
    # in-memory SQLite uses a single shared connection, no pool sizing
    if ":memory:" not in db.url:
        options.update(
            pool_size=db.pool_size,
            max_overflow=db.max_overflow,
            pool_timeout=db.pool_timeout,
        )
    return options


def build_engine(db: DatabaseConfig) -> Engine:
    engine = create_engine(db.url, **_engine_options(db))
    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _apply_pragmas(dbapi_conn, _record) -> None:
            cur = dbapi_conn.cursor()
            try:
                for pragma in SQLITE_PRAGMAS:
                    cur.execute(pragma)
            finally:
                cur.close()

    return engine


ENGINE: Engine = build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """One transaction per repository call; commits on success, rolls back on error."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception as exc:
        logger.debug(f"db.session: rolling back after {type(exc).__name__}")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()


def init_db() -> None:
    # models register their tables on Base.metadata at import time
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"db: schema ensured on {ENGINE.url.render_as_string(hide_password=True)}")


def reset_schema() -> None:
    from . import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    logger.warning("db: schema dropped and recreated")
