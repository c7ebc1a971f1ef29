"""Data Transfer Objects for application layer."""

from user_identity.application.dtos.user_dto import (
    CreateUserCommand,
    GetUserCommand,
    UpdateUserCommand,
    UserResultDTO,
)

__all__ = ["CreateUserCommand", "GetUserCommand", "UpdateUserCommand", "UserResultDTO"]
