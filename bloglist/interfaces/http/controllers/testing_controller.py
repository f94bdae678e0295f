# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint

from bloglist.application.use_cases.testing.reset_state import ResetStateUseCase
from bloglist.infrastructure.audit import AuditAction, audit_log
from bloglist.shared.middleware.rate_limit import reset_rate_limits

from ._request import client_ip


class TestingController:
    """Routes for end-to-end test setup. Registered only when APP_ENV=test."""

    __test__ = False

    def __init__(self, *, reset_use_case: ResetStateUseCase) -> None:
        self._reset_use_case = reset_use_case

    def reset(self) -> tuple[str, int]:
        self._reset_use_case.execute()
        reset_rate_limits()
        audit_log(AuditAction.STATE_RESET, ip_address=client_ip())
        return "", 204

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("testing", __name__, url_prefix="/api/testing")
        bp.add_url_rule("/reset", view_func=self.reset, methods=["POST"])
        return bp
