# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from bloglist.shared.errors import register_error_handler
from bloglist.shared.logging import logger


def _http_error_code(exc: HTTPException) -> str:
    return (exc.name or "http_error").lower().replace(" ", "_")


def configure_error_handling(app: Flask) -> None:
    """Every failure leaves the API as JSON, unknown routes included."""

    register_error_handler(app)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        if exc.code is None or exc.code < 400:
            return exc
        logger.info(f"HTTP {exc.code} on {request.method} {request.path}")
        return jsonify({"error": _http_error_code(exc)}), exc.code
