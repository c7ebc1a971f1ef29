"""Application layer exceptions.

The user use cases report failures through a closed set of four error
kinds, all subclasses of UserError:

- UserAlreadyExistsError  - duplicate email on creation/update
- UserNotFoundError       - lookup or update target missing
- InvalidUserDataError    - a value object or the password policy rejected input
- UserUnknownError        - anything else (store/hasher failures, bugs)

Each carries a machine-readable error_code that the presentation layer
maps to an HTTP status.
"""

from user_identity.domain.value_objects import Email


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UserError(ApplicationError):
    """Base class of every failure a user use case can return."""


class UserAlreadyExistsError(UserError):
    """Raised when attempting to register an email that is already taken."""

    def __init__(self, email: Email):
        self.email = email
        super().__init__(
            f"The user already exists at this address {email}",
            error_code="USER_ALREADY_EXISTS",
        )


class UserNotFoundError(UserError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            f"User with ID {user_id} not found", error_code="USER_NOT_FOUND"
        )


class InvalidUserDataError(UserError):
    """Raised when user input fails domain validation."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause), error_code="INVALID_USER_DATA")
        self.__cause__ = cause


class UserUnknownError(UserError):
    """Raised for any failure that is not a known user error."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(
            str(cause) or type(cause).__name__, error_code="USER_UNKNOWN_ERROR"
        )
        self.__cause__ = cause
