# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .blogs.entities import BlogDraft, BlogEntry
from .exceptions import InvariantViolation, InvariantViolationError
from .users.entities import SessionToken, User

__all__ = [
    "BlogDraft",
    "BlogEntry",
    "InvariantViolation",
    "InvariantViolationError",
    "SessionToken",
    "User",
]
