# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bloglist.domain.blogs.authorization import ensure_can_delete
from bloglist.domain.blogs.exceptions import BlogNotFoundError
from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.shared.logging import logger


class DeleteBlogUseCase:
    def __init__(self, *, blogs: BlogRepository) -> None:
        self._blogs = blogs

    def execute(self, blog_id: int, caller_id: int) -> None:
        with self._blogs.lock(blog_id):
            entry = self._blogs.find_by_id(blog_id)
            if entry is None:
                raise BlogNotFoundError(blog_id)
            ensure_can_delete(entry, caller_id)
            if not self._blogs.remove(blog_id):
                raise BlogNotFoundError(blog_id)
        logger.info(f"blogs.delete: ok blog_id={blog_id} caller_id={caller_id}")
