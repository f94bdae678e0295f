# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Protocol

from .entities import BlogDraft, BlogEntry


class BlogRepository(Protocol):
    def add(self, draft: BlogDraft) -> BlogEntry: ...
    def find_by_id(self, blog_id: int) -> BlogEntry | None: ...
    def increment_likes(self, blog_id: int) -> BlogEntry | None: ...
    def remove(self, blog_id: int) -> bool: ...
    def list_all(self) -> Sequence[BlogEntry]: ...
    def lock(self, blog_id: int) -> AbstractContextManager[object]: ...
    def clear(self) -> None: ...
