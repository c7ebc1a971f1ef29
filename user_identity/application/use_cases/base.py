"""Shared failure handling for the user use cases."""

import logging

from user_identity.application.exceptions import (
    UserError,
    UserUnknownError,
    classify_user_error,
)
from user_identity.application.result import Failure

logger = logging.getLogger(__name__)


def to_failure(exc: Exception, operation: str) -> Failure[UserError]:
    """
    Classify an exception caught at a use case boundary and wrap it.

    Expected failures (invalid input, duplicates, missing users) are
    logged at INFO. Unknown failures are logged at ERROR with the
    traceback, since they point at a broken adapter or a bug.

    Args:
        exc: The exception raised somewhere in the pipeline
        operation: Short name of the use case, used in log messages

    Returns:
        Failure carrying one of the four UserError kinds
    """
    error = classify_user_error(exc)

    if isinstance(error, UserUnknownError):
        logger.error(f"{operation} failed unexpectedly: {error.message}", exc_info=exc)
    else:
        logger.info(f"{operation} rejected [{error.error_code}]: {error.message}")

    return Failure(error)
