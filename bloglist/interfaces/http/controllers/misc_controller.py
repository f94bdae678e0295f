# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from bloglist import __version__
from bloglist.infrastructure.health import database_counts
from bloglist.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__, url_prefix="/api")
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> tuple[Response, int]:
        status: dict[str, object] = {"ok": True, "version": __version__}
        try:
            status.update(database_counts())
            status["database"] = "ok"
        except Exception as exc:
            logger.exception("health: database check failed")
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
            return jsonify(status), 503
        return jsonify(status), 200
