"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Model for every error rendered from an ApplicationError.

    Matches the body produced by application_error_handler.
    """

    detail: str = Field(
        ...,
        description="Human-readable error message",
        examples=["User with ID 7c9e6679-7425-40de-944b-e07fc1f90ae7 not found"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["USER_NOT_FOUND", "USER_ALREADY_EXISTS", "INVALID_USER_DATA"],
    )


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error.

    Represents a single validation error with the field location and error message.
    """

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.email', 'body.age')",
        examples=["body.email", "body.age", "body.first_name"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=[
            "Field required",
            "Input should be a valid integer",
        ],
    )


class ValidationErrorResponse(BaseModel):
    """Model for the complete 422 validation error response.

    This is the actual format returned by the validation_error_handler
    in user_identity/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Validation failed"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["VALIDATION_ERROR"],
    )
    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "body.age",
                        "message": "Input should be a valid integer",
                    },
                    {
                        "field": "body.first_name",
                        "message": "Field required",
                    },
                ],
            }
        }
    }
