# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from bloglist.application.use_cases.users.login_user import LoginUserUseCase
from bloglist.application.use_cases.users.logout_user import LogoutUserUseCase
from bloglist.domain.users.exceptions import WrongCredentialsError
from bloglist.infrastructure.audit import AuditAction, audit_log
from bloglist.infrastructure.auth import bearer_token
from bloglist.interfaces.http.dto.auth import LoginRequestDTO, LoginResponseDTO
from bloglist.shared.logging import logger
from bloglist.shared.middleware.rate_limit import rate_limit

from ._request import client_ip, parse_body


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    @rate_limit()
    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO)
        ip_address = client_ip()

        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except WrongCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=result.user.id,
            ip_address=ip_address,
            details={"username": dto.username},
        )
        payload = LoginResponseDTO(
            token=result.token,
            username=result.user.username,
            name=result.user.name,
        ).model_dump()
        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(payload), 200

    def logout(self) -> tuple[str, int]:
        self._logout_use_case.execute(bearer_token())
        audit_log(AuditAction.LOGOUT, ip_address=client_ip())
        logger.info("auth.logout: ok")
        return "", 204

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
