# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from bloglist.shared.config import load_config
from bloglist.shared.logging import (
    clear_request_context,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"
_HIDDEN_HEADERS = frozenset({"authorization", "cookie"})


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def _visible_headers() -> dict[str, str]:
    return {
        key: ("<hidden>" if key.lower() in _HIDDEN_HEADERS else value)
        for key, value in request.headers.items()
    }


def configure_request_logging(app: Flask) -> None:
    """Log one line per request and echo the correlation id back to the client."""

    debug_mode = load_config().debug_logging

    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6))
        g.request_started = time.perf_counter()
        if debug_mode:
            logger.debug(
                f"-> {request.method} {request.full_path.rstrip('?')} from {_client_ip()} "
                f"headers={_visible_headers()} body_size={request.content_length or 0}"
            )

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        response.headers[REQUEST_ID_HEADER] = get_correlation_id()
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms, ip={_client_ip()})"
        )
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"{request.method} {request.path} aborted: {type(exc).__name__}")
        clear_request_context()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
