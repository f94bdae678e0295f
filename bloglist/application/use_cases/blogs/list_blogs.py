# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bloglist.domain.blogs.ranking import rank
from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.domain.users.repositories import UserRepository

from .details import BlogDetails, attach_owners


class ListBlogsUseCase:
    def __init__(self, *, blogs: BlogRepository, users: UserRepository) -> None:
        self._blogs = blogs
        self._users = users

    def execute(self) -> list[BlogDetails]:
        return attach_owners(rank(self._blogs.list_all()), self._users)
