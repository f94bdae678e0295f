# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain entities for shared blog entries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from bloglist.domain.exceptions import InvariantViolation

_TEXT_FIELDS = ("title", "author", "url")


def _require_text(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise InvariantViolation(f"{field} must be a string", field=field)
    stripped = value.strip()
    if not stripped:
        raise InvariantViolation(f"{field} must not be empty", field=field)
    return stripped


@dataclass(slots=True, frozen=True)
class BlogDraft:
    """Validated input for a blog entry that has not been stored yet."""

    owner_id: int
    title: str
    author: str
    url: str

    def __post_init__(self) -> None:
        for fld in _TEXT_FIELDS:
            object.__setattr__(self, fld, _require_text(getattr(self, fld), fld))


@dataclass(slots=True, frozen=True)
class BlogEntry:
    """A stored blog entry.

    ``sequence`` records creation order and is the tie-break key when two
    entries have the same number of likes. ``owner_id`` never changes.
    """

    id: int
    title: str
    author: str
    url: str
    likes: int
    owner_id: int
    sequence: int
    created_at: datetime

    def __post_init__(self) -> None:
        for fld in _TEXT_FIELDS:
            _require_text(getattr(self, fld), fld)
        if self.likes < 0:
            raise InvariantViolation("likes cannot be negative", field="likes")

    def liked(self) -> BlogEntry:
        return replace(self, likes=self.likes + 1)
