# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .entities import BlogEntry
from .exceptions import ForbiddenError


def can_delete(entry: BlogEntry, caller_id: int | None) -> bool:
    return caller_id is not None and entry.owner_id == caller_id


def ensure_can_delete(entry: BlogEntry, caller_id: int | None) -> None:
    if not can_delete(entry, caller_id):
        raise ForbiddenError(entry.id)
