# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Collapse pydantic errors to one message per field, first error wins."""

    messages: dict[str, str] = {}
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        messages.setdefault(field, error.get("msg", "Invalid value"))

    return {
        "fields": sorted(messages),
        "errors": [{"field": field, "message": message} for field, message in messages.items()],
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    first = context["errors"][0] if context["errors"] else None
    message = f"{first['field']}: {first['message']}" if first else None
    raise ValidationError(context=context, message=message) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
