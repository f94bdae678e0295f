# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.blogs.create_blog import CreateBlogUseCase
from .use_cases.blogs.delete_blog import DeleteBlogUseCase
from .use_cases.blogs.details import BlogDetails
from .use_cases.blogs.get_blog import GetBlogUseCase
from .use_cases.blogs.like_blog import LikeBlogUseCase
from .use_cases.blogs.list_blogs import ListBlogsUseCase
from .use_cases.testing.reset_state import ResetStateUseCase
from .use_cases.users.list_users import ListUsersUseCase, UserDetails
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.resolve_session import ResolveSessionUseCase

__all__ = [
    "BlogDetails",
    "CreateBlogUseCase",
    "DeleteBlogUseCase",
    "GetBlogUseCase",
    "LikeBlogUseCase",
    "ListBlogsUseCase",
    "ListUsersUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "ResetStateUseCase",
    "ResolveSessionUseCase",
    "UserDetails",
]
