"""Exception handlers for converting exceptions to HTTP responses.

Instead of creating individual handlers for each exception, a single
handler covers every ApplicationError and picks the HTTP status from its
error_code attribute.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from user_identity.application.exceptions import ApplicationError
from user_identity.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    This covers the four user error kinds returned by the use cases.
    The HTTP status code is determined by the error_code attribute
    using the ERROR_CODE_TO_HTTP_STATUS mapping.
    """
    http_status = get_http_status_for_error_code(exc.error_code)

    if http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.error_code}",
            exc_info=exc,
        )
        detail = "An internal server error occurred"
    else:
        detail = exc.message

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": detail,
            "error_code": exc.error_code,
        },
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request bodies or paths with the wrong shape.

    Only missing fields and wrong JSON types land here (422). Values with
    the right shape but failing a user rule come back from the use cases
    as INVALID_USER_DATA (400) instead.
    """
    validation_errors = []
    for error in exc.errors():
        # Build field path (e.g., "body.email" or "path.user_id")
        field_location = ".".join(str(loc) for loc in error["loc"])

        validation_errors.append(
            {
                "field": field_location,
                "message": error["msg"],
            }
        )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle SQLAlchemy errors raised outside the use cases.

    Store failures inside a use case are already classified as
    USER_UNKNOWN_ERROR; this covers the rest (e.g. dependency setup).
    """
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the traceback, answer 500 without details."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
