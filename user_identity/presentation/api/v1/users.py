"""User API endpoints."""

from fastapi import APIRouter, Depends, status

from user_identity.application.dtos.user_dto import GetUserCommand
from user_identity.application.ports import (
    ICreateUserUseCase,
    IGetUserUseCase,
    IUpdateUserUseCase,
)
from user_identity.presentation.dependencies import (
    get_create_user_use_case,
    get_get_user_use_case,
    get_update_user_use_case,
)
from user_identity.presentation.error_schemas import ErrorResponse
from user_identity.presentation.user_schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a user with email, age, password and names.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid user data"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    use_case: ICreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """
    Create a new user.

    The use case returns a Result instead of raising. unwrap() re-raises
    the UserError of a Failure, and the global ApplicationError handler
    turns it into the HTTP response.
    """
    result = await use_case(request.to_command())
    return UserResponse.from_result(result.unwrap())


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    description="Retrieve a user by their ID.",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(
    user_id: str,
    use_case: IGetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Get user by ID."""
    result = await use_case(GetUserCommand(id=user_id))
    return UserResponse.from_result(result.unwrap())


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Update any subset of email, age, password and names.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid user data"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    use_case: IUpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Update user."""
    result = await use_case(request.to_command(user_id))
    return UserResponse.from_result(result.unwrap())
