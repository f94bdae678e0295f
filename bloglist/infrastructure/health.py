# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import func, select

from bloglist.infrastructure.db import session_scope
from bloglist.infrastructure.db.models import Blog, User


def database_counts() -> dict[str, int]:
    """Row counts for the health endpoint; raises when the database is unreachable."""

    with session_scope() as session:
        return {
            "users": session.scalar(select(func.count()).select_from(User)) or 0,
            "blogs": session.scalar(select(func.count()).select_from(Blog)) or 0,
        }


__all__ = ["database_counts"]
