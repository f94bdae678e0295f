# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request

from bloglist.shared.config import load_config
from bloglist.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _log_app_error(exc: AppError) -> None:
    line = f"{exc.code} ({int(exc.status)}) on {request.method} {request.path}"
    if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(line)
    elif exc.status in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
        logger.warning(line)
    else:
        logger.info(line)


def register_error_handler(app: Flask) -> None:
    debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        _log_app_error(exc)
        return handle_app_error(exc)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        where = f"{request.method} {request.path} user={g.get('user_id')}"
        if debug_mode:
            logger.exception(f"Unhandled exception on {where}")
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {where}")
        return jsonify({"error": "internal_error"}), HTTPStatus.INTERNAL_SERVER_ERROR
