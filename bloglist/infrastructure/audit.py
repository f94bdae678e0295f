# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Security-relevant events written to the application log under the ``audit`` tag."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from bloglist.shared.logging import logger


class AuditAction(str, Enum):
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"
    REGISTER = "register"

    BLOG_CREATED = "blog_created"
    BLOG_LIKED = "blog_liked"
    BLOG_DELETED = "blog_deleted"
    BLOG_DELETE_DENIED = "blog_delete_denied"

    STATE_RESET = "state_reset"


_SECRET_FRAGMENTS = ("password", "token", "secret")


def _render_details(details: Mapping[str, Any]) -> str:
    parts = []
    for key, value in details.items():
        if any(fragment in key.lower() for fragment in _SECRET_FRAGMENTS):
            value = "***"
        parts.append(f"{key}={value!r}")
    return " ".join(parts)


def audit_log(
    action: AuditAction,
    *,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: Mapping[str, Any] | None = None,
    success: bool = True,
) -> None:
    line = f"audit.{action.value} {'ok' if success else 'denied'} user={user_id} ip={ip_address}"
    if details:
        line = f"{line} {_render_details(details)}"
    logger.bind(audit=True).log("INFO" if success else "WARNING", line)


__all__ = ["AuditAction", "audit_log"]
