"""Classify arbitrary failures into the UserError taxonomy."""

from user_identity.application.exceptions.exceptions import (
    InvalidUserDataError,
    UserError,
    UserUnknownError,
)


def classify_user_error(exc: BaseException) -> UserError:
    """
    Map any exception raised inside a use case to a UserError.

    - UserError subclasses pass through unchanged
    - ValueError (raised by value objects and the password policy)
      becomes InvalidUserDataError
    - everything else becomes UserUnknownError

    Args:
        exc: The exception caught at the use case boundary

    Returns:
        One of the four UserError kinds
    """
    if isinstance(exc, UserError):
        return exc

    if isinstance(exc, ValueError):
        return InvalidUserDataError(exc)

    return UserUnknownError(exc)
