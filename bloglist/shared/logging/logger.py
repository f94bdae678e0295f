# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Structured logging utilities.

Every record carries the request correlation id and, once the bearer token
has been resolved, the id of the calling user.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> "
    "<yellow>user={extra[user_id]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")
_USER_ID: ContextVar[str] = ContextVar("user_id", default="-")


def _context() -> dict[str, str]:
    return {"correlation_id": _CORRELATION_ID.get(), "user_id": _USER_ID.get()}


class _InterceptHandler(logging.Handler):
    """Routes stdlib logging (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(**_context()).opt(depth=6, exception=record.exc_info).log(
            level, record.getMessage()
        )


class ContextualLogger:
    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def set_request_user(user_id: int | None) -> None:
    _USER_ID.set("-" if user_id is None else str(user_id))


def clear_request_context() -> None:
    _CORRELATION_ID.set("-")
    _USER_ID.set("-")


def setup_logging(
    level: str | None = None,
    *,
    log_file: str | Path | None = None,
    debug_mode: bool = False,
) -> None:
    level = "DEBUG" if debug_mode else (level or "INFO").upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-", "user_id": "-"}, patcher=sanitize_record)
    _logger.add(sys.stderr, level=level, format=_FMT, colorize=True, backtrace=False, diagnose=False)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            str(path),
            level=level,
            format=_FMT,
            colorize=False,
            backtrace=False,
            diagnose=False,
            enqueue=True,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


logger = ContextualLogger()

__all__ = [
    "clear_request_context",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "set_request_user",
    "setup_logging",
]
