# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Read model pairing a blog entry with the user who created it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bloglist.domain.blogs.entities import BlogEntry
from bloglist.domain.users.entities import User
from bloglist.domain.users.repositories import UserRepository


@dataclass(slots=True, frozen=True)
class BlogDetails:
    entry: BlogEntry
    owner: User | None


def attach_owners(entries: Sequence[BlogEntry], users: UserRepository) -> list[BlogDetails]:
    owners = users.find_many({entry.owner_id for entry in entries})
    return [BlogDetails(entry=entry, owner=owners.get(entry.owner_id)) for entry in entries]


def attach_owner(entry: BlogEntry, users: UserRepository) -> BlogDetails:
    return attach_owners([entry], users)[0]
