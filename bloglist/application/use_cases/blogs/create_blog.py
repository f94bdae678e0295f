# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bloglist.domain.blogs.entities import BlogDraft
from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.domain.users.repositories import UserRepository
from bloglist.shared.errors.base import UnauthenticatedError
from bloglist.shared.logging import logger

from .details import BlogDetails


class CreateBlogUseCase:
    def __init__(self, *, blogs: BlogRepository, users: UserRepository) -> None:
        self._blogs = blogs
        self._users = users

    def execute(self, owner_id: int, title: str, author: str, url: str) -> BlogDetails:
        owner = self._users.find_by_id(owner_id)
        if owner is None:
            raise UnauthenticatedError()
        draft = BlogDraft(owner_id=owner.id, title=title, author=author, url=url)
        entry = self._blogs.add(draft)
        logger.info(f"blogs.create: ok blog_id={entry.id} owner_id={owner.id}")
        return BlogDetails(entry=entry, owner=owner)
