# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify

from bloglist.application.use_cases.blogs.create_blog import CreateBlogUseCase
from bloglist.application.use_cases.blogs.delete_blog import DeleteBlogUseCase
from bloglist.application.use_cases.blogs.get_blog import GetBlogUseCase
from bloglist.application.use_cases.blogs.like_blog import LikeBlogUseCase
from bloglist.application.use_cases.blogs.list_blogs import ListBlogsUseCase
from bloglist.application.use_cases.users.resolve_session import ResolveSessionUseCase
from bloglist.domain.blogs.exceptions import ForbiddenError
from bloglist.infrastructure.audit import AuditAction, audit_log
from bloglist.infrastructure.auth import auth_required, current_user
from bloglist.interfaces.http.dto.blogs import BlogCreateRequestDTO, BlogDTO
from bloglist.shared.logging import logger

from ._request import client_ip, parse_body


class BlogsController:
    def __init__(
        self,
        *,
        session_resolver: ResolveSessionUseCase,
        list_use_case: ListBlogsUseCase,
        get_use_case: GetBlogUseCase,
        create_use_case: CreateBlogUseCase,
        like_use_case: LikeBlogUseCase,
        delete_use_case: DeleteBlogUseCase,
    ) -> None:
        self.session_resolver = session_resolver
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._like_use_case = like_use_case
        self._delete_use_case = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("blogs", __name__, url_prefix="/api")
        bp.add_url_rule("/blogs", view_func=self.list_blogs, methods=["GET"])
        bp.add_url_rule("/blogs", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/blogs/<int:blog_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/blogs/<int:blog_id>", view_func=self.like, methods=["PUT"])
        bp.add_url_rule("/blogs/<int:blog_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_blogs(self) -> Response:
        t0 = perf_counter()
        items = self._list_use_case.execute()
        dt = (perf_counter() - t0) * 1000
        logger.info(f"blogs.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([BlogDTO.from_details(item).model_dump() for item in items])

    def get(self, blog_id: int) -> Response:
        details = self._get_use_case.execute(blog_id)
        return jsonify(BlogDTO.from_details(details).model_dump())

    @auth_required
    def create(self) -> tuple[Response, int]:
        user = current_user()
        dto = parse_body(BlogCreateRequestDTO)
        details = self._create_use_case.execute(user.id, dto.title, dto.author, dto.url)
        audit_log(
            AuditAction.BLOG_CREATED,
            user_id=user.id,
            ip_address=client_ip(),
            details={"blog_id": details.entry.id, "title": details.entry.title},
        )
        return jsonify(BlogDTO.from_details(details).model_dump()), 201

    @auth_required
    def like(self, blog_id: int) -> Response:
        # Any body sent by the client is ignored: each request is exactly one like.
        user = current_user()
        details = self._like_use_case.execute(blog_id)
        audit_log(
            AuditAction.BLOG_LIKED,
            user_id=user.id,
            details={"blog_id": blog_id, "likes": details.entry.likes},
        )
        return jsonify(BlogDTO.from_details(details).model_dump())

    @auth_required
    def delete(self, blog_id: int) -> tuple[str, int]:
        user = current_user()
        try:
            self._delete_use_case.execute(blog_id, user.id)
        except ForbiddenError:
            audit_log(
                AuditAction.BLOG_DELETE_DENIED,
                user_id=user.id,
                ip_address=client_ip(),
                details={"blog_id": blog_id},
                success=False,
            )
            raise
        audit_log(
            AuditAction.BLOG_DELETED,
            user_id=user.id,
            ip_address=client_ip(),
            details={"blog_id": blog_id},
        )
        return "", 204
