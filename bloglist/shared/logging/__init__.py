# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logger import (
    clear_request_context,
    get_correlation_id,
    logger,
    set_correlation_id,
    set_request_user,
    setup_logging,
)
from .sensitive_filter import sanitize_message

__all__ = [
    "clear_request_context",
    "get_correlation_id",
    "logger",
    "sanitize_message",
    "set_correlation_id",
    "set_request_user",
    "setup_logging",
]
