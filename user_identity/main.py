"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from user_identity.presentation.api.v1 import users
from user_identity.presentation.dependencies import get_database_engine
from user_identity.presentation.exception_handlers import (
    application_error_handler,
    validation_error_handler,
    database_error_handler,
    generic_exception_handler,
)
from user_identity.presentation.error_schemas import ValidationErrorResponse
from user_identity.application.exceptions import ApplicationError
from user_identity.infrastructure.config.logging_config import configure_logging
from user_identity.infrastructure.config.settings import get_settings
from user_identity.infrastructure.persistence.database import create_tables


# Get settings for app configuration
_settings = get_settings()
configure_logging(_settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the users table on startup. Tests manage their own schema."""
    if not _settings.is_testing:
        await create_tables(get_database_engine(_settings))
    logger.info(f"{_settings.app_name} {_settings.app_version} started ({_settings.environment})")
    yield


app = FastAPI(
    title=_settings.app_name,
    description="User identity service following Clean Architecture principles with ports and adapters",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
# - ApplicationError handles every UserError returned by the use cases
# - RequestValidationError handles Pydantic validation errors
# - SQLAlchemyError handles database errors
# - Exception handles everything else
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(users.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


def custom_openapi():
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default HTTPValidationError schema with ValidationErrorResponse
    to match the actual error format returned by our validation_error_handler.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})

    # Drop FastAPI's default validation error models
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)

    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    schemas.update(schemas["ValidationErrorResponse"].pop("$defs", {}))

    # Point every 422 response at our schema
    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                operation["responses"]["422"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


# Override the default OpenAPI schema generation
app.openapi = custom_openapi
