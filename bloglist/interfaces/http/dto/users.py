from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from bloglist.application.use_cases.users.list_users import UserDetails
from bloglist.domain.users.entities import User

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(min_length=3, max_length=64)
    name: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not _USERNAME_RE.match(value):
            raise PydanticCustomError(
                "username_invalid_chars",
                "Username may contain only letters, digits, '.', '_' and '-'",
                {"pattern": _USERNAME_RE.pattern},
            )
        return value


class UserSummaryDTO(BaseModel):
    id: int
    username: str
    name: str

    @classmethod
    def from_entity(cls, user: User) -> UserSummaryDTO:
        return cls(id=user.id, username=user.username, name=user.name)


class UserBlogDTO(BaseModel):
    id: int
    title: str
    author: str
    url: str
    likes: int


class UserDTO(UserSummaryDTO):
    blogs: list[UserBlogDTO] = Field(default_factory=list)

    @classmethod
    def from_details(cls, details: UserDetails) -> UserDTO:
        return cls(
            id=details.user.id,
            username=details.user.username,
            name=details.user.name,
            blogs=[
                UserBlogDTO(
                    id=entry.id,
                    title=entry.title,
                    author=entry.author,
                    url=entry.url,
                    likes=entry.likes,
                )
                for entry in details.blogs
            ],
        )
