# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from bloglist.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class WrongCredentialsError(DomainError):
    code = "wrong_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Wrong username or password"
