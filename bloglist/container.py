# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from bloglist.application.services.password_hashing import WerkzeugPasswordHasher
from bloglist.application.use_cases.blogs.create_blog import CreateBlogUseCase
from bloglist.application.use_cases.blogs.delete_blog import DeleteBlogUseCase
from bloglist.application.use_cases.blogs.get_blog import GetBlogUseCase
from bloglist.application.use_cases.blogs.like_blog import LikeBlogUseCase
from bloglist.application.use_cases.blogs.list_blogs import ListBlogsUseCase
from bloglist.application.use_cases.testing.reset_state import ResetStateUseCase
from bloglist.application.use_cases.users.list_users import ListUsersUseCase
from bloglist.application.use_cases.users.login_user import LoginUserUseCase
from bloglist.application.use_cases.users.logout_user import LogoutUserUseCase
from bloglist.application.use_cases.users.register_user import RegisterUserUseCase
from bloglist.application.use_cases.users.resolve_session import ResolveSessionUseCase
from bloglist.infrastructure.locks import EntryLocks
from bloglist.infrastructure.repositories.blogs.sqlalchemy_blog_repository import (
    SqlAlchemyBlogRepository,
)
from bloglist.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from bloglist.interfaces.http.controllers.auth_controller import AuthController
from bloglist.interfaces.http.controllers.blogs_controller import BlogsController
from bloglist.interfaces.http.controllers.misc_controller import MiscController
from bloglist.interfaces.http.controllers.testing_controller import TestingController
from bloglist.interfaces.http.controllers.users_controller import UsersController
from bloglist.shared.config import load_config


class Container:
    def __init__(self) -> None:
        self._config = load_config()

    # Repositories

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_token_repository(self) -> SqlAlchemySessionTokenRepository:
        return SqlAlchemySessionTokenRepository(
            ttl_seconds=self._config.security.token_ttl_seconds
        )

    @cached_property
    def blog_locks(self) -> EntryLocks:
        return EntryLocks()

    @cached_property
    def blog_repository(self) -> SqlAlchemyBlogRepository:
        return SqlAlchemyBlogRepository(locks=self.blog_locks)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_token_repository)

    @cached_property
    def resolve_session_use_case(self) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
        )

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository, blogs=self.blog_repository)

    # Blog use cases

    @cached_property
    def list_blogs_use_case(self) -> ListBlogsUseCase:
        return ListBlogsUseCase(blogs=self.blog_repository, users=self.user_repository)

    @cached_property
    def get_blog_use_case(self) -> GetBlogUseCase:
        return GetBlogUseCase(blogs=self.blog_repository, users=self.user_repository)

    @cached_property
    def create_blog_use_case(self) -> CreateBlogUseCase:
        return CreateBlogUseCase(blogs=self.blog_repository, users=self.user_repository)

    @cached_property
    def like_blog_use_case(self) -> LikeBlogUseCase:
        return LikeBlogUseCase(blogs=self.blog_repository, users=self.user_repository)

    @cached_property
    def delete_blog_use_case(self) -> DeleteBlogUseCase:
        return DeleteBlogUseCase(blogs=self.blog_repository)

    @cached_property
    def reset_state_use_case(self) -> ResetStateUseCase:
        return ResetStateUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            blogs=self.blog_repository,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            list_users_use_case=self.list_users_use_case,
        )

    @cached_property
    def blogs_controller(self) -> BlogsController:
        return BlogsController(
            session_resolver=self.resolve_session_use_case,
            list_use_case=self.list_blogs_use_case,
            get_use_case=self.get_blog_use_case,
            create_use_case=self.create_blog_use_case,
            like_use_case=self.like_blog_use_case,
            delete_use_case=self.delete_blog_use_case,
        )

    @cached_property
    def testing_controller(self) -> TestingController:
        return TestingController(reset_use_case=self.reset_state_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
