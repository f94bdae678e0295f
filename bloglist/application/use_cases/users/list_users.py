# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from bloglist.domain.blogs.entities import BlogEntry
from bloglist.domain.blogs.ranking import rank
from bloglist.domain.blogs.repositories import BlogRepository
from bloglist.domain.users.entities import User
from bloglist.domain.users.repositories import UserRepository


@dataclass(slots=True)
class UserDetails:
    user: User
    blogs: list[BlogEntry] = field(default_factory=list)


class ListUsersUseCase:
    def __init__(self, *, users: UserRepository, blogs: BlogRepository) -> None:
        self._users = users
        self._blogs = blogs

    def execute(self) -> list[UserDetails]:
        by_owner: dict[int, list[BlogEntry]] = defaultdict(list)
        for entry in rank(self._blogs.list_all()):
            by_owner[entry.owner_id].append(entry)
        return [
            UserDetails(user=user, blogs=by_owner.get(user.id, []))
            for user in self._users.list_all()
        ]
