# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from bloglist.application.use_cases.users.list_users import ListUsersUseCase
from bloglist.application.use_cases.users.register_user import RegisterUserUseCase
from bloglist.infrastructure.audit import AuditAction, audit_log
from bloglist.interfaces.http.dto.users import RegisterRequestDTO, UserDTO, UserSummaryDTO

from ._request import client_ip, parse_body


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        list_users_use_case: ListUsersUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._list_users_use_case = list_users_use_case

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO)
        user = self._register_use_case.execute(dto.username, dto.name, dto.password)
        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            details={"username": dto.username},
        )
        return jsonify(UserSummaryDTO.from_entity(user).model_dump()), 201

    def list_users(self) -> Response:
        items = self._list_users_use_case.execute()
        return jsonify([UserDTO.from_details(item).model_dump() for item in items])

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api")
        bp.add_url_rule("/users", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/users", view_func=self.list_users, methods=["GET"])
        return bp
