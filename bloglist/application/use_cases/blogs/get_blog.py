# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bloglist.domain.blogs.exceptions import BlogNotFoundError
from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.domain.users.repositories import UserRepository

from .details import BlogDetails, attach_owner


class GetBlogUseCase:
    def __init__(self, *, blogs: BlogRepository, users: UserRepository) -> None:
        self._blogs = blogs
        self._users = users

    def execute(self, blog_id: int) -> BlogDetails:
        entry = self._blogs.find_by_id(blog_id)
        if entry is None:
            raise BlogNotFoundError(blog_id)
        return attach_owner(entry, self._users)
