# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import UTC

from sqlalchemy import delete, func, select, update

from bloglist.domain.blogs.entities import BlogDraft
from bloglist.domain.blogs.entities import BlogEntry as DomainBlogEntry
from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.infrastructure.db.models import Blog
from bloglist.infrastructure.db.session import session_scope
from bloglist.infrastructure.locks import EntryLocks


def _to_domain(row: Blog) -> DomainBlogEntry:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainBlogEntry(
        id=row.id,
        title=row.title,
        author=row.author,
        url=row.url,
        likes=row.likes,
        owner_id=row.user_id,
        sequence=row.sequence,
        created_at=created_at,
    )


class SqlAlchemyBlogRepository(BlogRepository):
    def __init__(self, locks: EntryLocks | None = None) -> None:
        self._locks = locks if locks is not None else EntryLocks()
        self._create_lock = threading.Lock()

    def lock(self, blog_id: int) -> AbstractContextManager[None]:
        return self._locks.hold(blog_id)

    def add(self, draft: BlogDraft) -> DomainBlogEntry:
        with self._create_lock, session_scope() as session:
            next_sequence = session.scalar(select(func.coalesce(func.max(Blog.sequence), 0))) + 1
            row = Blog(
                title=draft.title,
                author=draft.author,
                url=draft.url,
                likes=0,
                user_id=draft.owner_id,
                sequence=next_sequence,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def find_by_id(self, blog_id: int) -> DomainBlogEntry | None:
        with session_scope() as session:
            row = session.get(Blog, blog_id)
            if row is None:
                return None
            return _to_domain(row)

    def increment_likes(self, blog_id: int) -> DomainBlogEntry | None:
        with session_scope() as session:
            result = session.execute(
                update(Blog)
                .where(Blog.id == blog_id)
                .values(likes=Blog.likes + 1)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            row = session.get(Blog, blog_id, populate_existing=True)
            return _to_domain(row)

    def remove(self, blog_id: int) -> bool:
        with session_scope() as session:
            result = session.execute(delete(Blog).where(Blog.id == blog_id))
            return result.rowcount > 0

    def list_all(self) -> Sequence[DomainBlogEntry]:
        with session_scope() as session:
            rows = session.scalars(select(Blog)).all()
            return [_to_domain(row) for row in rows]

    def clear(self) -> None:
        with session_scope() as session:
            session.execute(delete(Blog))
