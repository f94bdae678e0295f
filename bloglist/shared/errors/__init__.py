from .base import (
    AppError,
    DomainError,
    UnauthenticatedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
