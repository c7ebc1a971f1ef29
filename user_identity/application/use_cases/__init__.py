"""User use cases - implementations of the primary ports."""

from user_identity.application.use_cases.create_user import CreateUserUseCase
from user_identity.application.use_cases.get_user import GetUserUseCase
from user_identity.application.use_cases.update_user import UpdateUserUseCase

__all__ = ["CreateUserUseCase", "GetUserUseCase", "UpdateUserUseCase"]
