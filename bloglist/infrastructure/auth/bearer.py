# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import Protocol

from flask import g, request

from bloglist.domain.users.entities import User
from bloglist.shared.errors.base import UnauthenticatedError
from bloglist.shared.logging import logger, set_request_user


class SessionResolver(Protocol):
    def execute(self, token: str | None) -> User: ...


class SupportsSessionResolver(Protocol):
    session_resolver: SessionResolver


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.lower().startswith("bearer "):
        return auth[7:].strip()
    return ""


def current_user() -> User:
    user = getattr(g, "current_user", None)
    if user is None:
        raise UnauthenticatedError()
    return user


def auth_required(f):
    """Resolve the bearer token through the controller's ``session_resolver``.

    The resolved user is stored on ``flask.g`` so handlers receive the
    caller identity explicitly via :func:`current_user`.
    """

    @wraps(f)
    def inner(controller: SupportsSessionResolver, *a, **kw):
        token = bearer_token()
        if not token:
            logger.warning(
                f"No Authorization header on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthenticatedError()

        try:
            user = controller.session_resolver.execute(token)
        except UnauthenticatedError:
            logger.warning(f"Auth failed (token not found/expired) on {request.method} {request.path}")
            raise

        g.user_id = user.id
        g.current_user = user
        set_request_user(user.id)
        logger.debug(f"Auth OK: user={user.id} {request.method} {request.path}")
        return f(controller, *a, **kw)

    return inner
