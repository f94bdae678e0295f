# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bearer import auth_required, bearer_token, current_user

__all__ = ["auth_required", "bearer_token", "current_user"]
