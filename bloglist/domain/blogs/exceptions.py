# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from bloglist.shared.errors.base import DomainError


class BlogNotFoundError(DomainError):
    code = "blog_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, blog_id: int) -> None:
        super().__init__(context={"blog_id": blog_id})


class ForbiddenError(DomainError):
    code = "forbidden"
    status = HTTPStatus.FORBIDDEN

    def __init__(self, blog_id: int) -> None:
        super().__init__(
            context={"blog_id": blog_id},
            message="only the creator can remove a blog",
        )
