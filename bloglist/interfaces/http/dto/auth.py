from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)


class LoginResponseDTO(BaseModel):
    token: str
    username: str
    name: str
