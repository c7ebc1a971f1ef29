"""Get user use case."""

from user_identity.application.dtos.user_dto import GetUserCommand, UserResultDTO
from user_identity.application.exceptions import UserError, UserNotFoundError
from user_identity.application.ports import IGetUserUseCase
from user_identity.application.result import Result, Success
from user_identity.application.use_cases.base import to_failure
from user_identity.domain.repositories.user_repository import IUserRepository
from user_identity.domain.value_objects import UserId


class GetUserUseCase(IGetUserUseCase):
    """Fetch a single user by id."""

    def __init__(self, user_repository: IUserRepository):
        self._user_repository = user_repository

    async def invoke(self, command: GetUserCommand) -> Result[UserResultDTO, UserError]:
        try:
            user_id = UserId.from_raw(command.id)
            user = await self._user_repository.find_by_id(user_id)

            if user is None:
                raise UserNotFoundError(command.id)

            return Success(UserResultDTO.from_entity(user))
        except Exception as exc:
            return to_failure(exc, "get_user")
