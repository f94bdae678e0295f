from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from bloglist.application.use_cases.blogs.details import BlogDetails

from .users import UserSummaryDTO


class BlogCreateRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=512)
    author: str = Field(min_length=1, max_length=256)
    url: str = Field(min_length=1, max_length=2048)


class BlogDTO(BaseModel):
    id: int
    title: str
    author: str
    url: str
    likes: int
    user: UserSummaryDTO | None = None

    @classmethod
    def from_details(cls, details: BlogDetails) -> BlogDTO:
        entry = details.entry
        return cls(
            id=entry.id,
            title=entry.title,
            author=entry.author,
            url=entry.url,
            likes=entry.likes,
            user=UserSummaryDTO.from_entity(details.owner) if details.owner else None,
        )
