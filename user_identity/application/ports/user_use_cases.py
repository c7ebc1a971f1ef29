"""Primary ports - what the outside world can ask the user core to do.

Each use case is a single async operation taking a command and returning
a Result: Success(UserResultDTO) or Failure(UserError). Implementations
never raise; every failure is classified and returned.

Instances are callable, so adapters can write either
`await use_case.invoke(command)` or `await use_case(command)`.
"""

from abc import ABC, abstractmethod

from user_identity.application.dtos.user_dto import (
    CreateUserCommand,
    GetUserCommand,
    UpdateUserCommand,
    UserResultDTO,
)
from user_identity.application.exceptions import UserError
from user_identity.application.result import Result


class ICreateUserUseCase(ABC):
    """Primary port for creating a new user."""

    @abstractmethod
    async def invoke(
        self, command: CreateUserCommand
    ) -> Result[UserResultDTO, UserError]:
        """
        Create a user from the data in the command.

        Args:
            command: Creation data (email, age, raw password, names)

        Returns:
            Success with the created user, or Failure with a UserError
        """
        pass

    async def __call__(
        self, command: CreateUserCommand
    ) -> Result[UserResultDTO, UserError]:
        return await self.invoke(command)


class IGetUserUseCase(ABC):
    """Primary port for fetching an existing user."""

    @abstractmethod
    async def invoke(self, command: GetUserCommand) -> Result[UserResultDTO, UserError]:
        """
        Fetch the user identified by the command.

        Returns:
            Success with the user, or Failure with a UserError
        """
        pass

    async def __call__(
        self, command: GetUserCommand
    ) -> Result[UserResultDTO, UserError]:
        return await self.invoke(command)


class IUpdateUserUseCase(ABC):
    """Primary port for partially updating a user."""

    @abstractmethod
    async def invoke(
        self, command: UpdateUserCommand
    ) -> Result[UserResultDTO, UserError]:
        """
        Apply the non-None fields of the command to an existing user.

        Returns:
            Success with the updated user, or Failure with a UserError
        """
        pass

    async def __call__(
        self, command: UpdateUserCommand
    ) -> Result[UserResultDTO, UserError]:
        return await self.invoke(command)
