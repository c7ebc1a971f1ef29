"""Application layer exceptions."""

from user_identity.application.exceptions.classifier import classify_user_error
from user_identity.application.exceptions.exceptions import (
    ApplicationError,
    InvalidUserDataError,
    UserAlreadyExistsError,
    UserError,
    UserNotFoundError,
    UserUnknownError,
)

__all__ = [
    "ApplicationError",
    "UserError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "InvalidUserDataError",
    "UserUnknownError",
    "classify_user_error",
]
