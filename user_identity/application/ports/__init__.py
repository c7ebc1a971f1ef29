"""Primary ports exposed by the application layer."""

from user_identity.application.ports.user_use_cases import (
    ICreateUserUseCase,
    IGetUserUseCase,
    IUpdateUserUseCase,
)

__all__ = ["ICreateUserUseCase", "IGetUserUseCase", "IUpdateUserUseCase"]
