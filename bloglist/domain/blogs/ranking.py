# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Listing order for blog entries."""

from __future__ import annotations

from collections.abc import Iterable

from .entities import BlogEntry


def ranking_key(entry: BlogEntry) -> tuple[int, int]:
    """Lower key ranks first: most liked, then earliest created."""

    return (-entry.likes, entry.sequence)


def rank(entries: Iterable[BlogEntry]) -> list[BlogEntry]:
    return sorted(entries, key=ranking_key)
