"""Update user use case."""

import logging

from user_identity.application.dtos.user_dto import UpdateUserCommand, UserResultDTO
from user_identity.application.exceptions import (
    UserAlreadyExistsError,
    UserError,
    UserNotFoundError,
)
from user_identity.application.ports import IUpdateUserUseCase
from user_identity.application.result import Result, Success
from user_identity.application.use_cases.base import to_failure
from user_identity.domain.repositories.user_repository import IUserRepository
from user_identity.domain.services.password_hasher import IPasswordHasher
from user_identity.domain.services.password_policy import PasswordPolicyService
from user_identity.domain.value_objects import Age, Email, Name, UserId

logger = logging.getLogger(__name__)


class UpdateUserUseCase(IUpdateUserUseCase):
    """
    Partially update an existing user.

    Pipeline (stops at the first failure):
    1. Load the current user; missing id -> UserNotFoundError
    2. Convert every supplied field to its value object
    3. If the email changes, reject it when another user already has it
    4. If a raw password is given: policy check, then hash it
    5. Merge the supplied fields into a new User (updated_at refreshed)
    6. Persist and return the stored user

    The hasher is only called when the command carries a raw password,
    and only after every other check has passed.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_policy: PasswordPolicyService,
        password_hasher: IPasswordHasher,
    ):
        self._user_repository = user_repository
        self._password_policy = password_policy
        self._password_hasher = password_hasher

    async def invoke(
        self, command: UpdateUserCommand
    ) -> Result[UserResultDTO, UserError]:
        try:
            user = await self._user_repository.find_by_id(UserId.from_raw(command.id))
            if user is None:
                raise UserNotFoundError(command.id)

            first_name = _optional(Name.from_raw, command.first_name)
            last_name = _optional(Name.from_raw, command.last_name)
            email = _optional(Email.from_raw, command.email)
            age = _optional(Age.from_raw, command.age)

            # Check email uniqueness if changing
            if email is not None and email != user.email:
                if await self._user_repository.exists_by_email(email):
                    raise UserAlreadyExistsError(email)

            password_hash = None
            if command.raw_password is not None:
                self._password_policy.is_valid(command.raw_password)
                password_hash = self._password_hasher.hash_password(
                    command.raw_password
                )

            updated_user = user.update(
                first_name=first_name,
                last_name=last_name,
                email=email,
                age=age,
                password_hash=password_hash,
            )
            saved_user = await self._user_repository.save(updated_user)

            logger.info(f"Updated user {saved_user.id}")
            return Success(UserResultDTO.from_entity(saved_user))
        except Exception as exc:
            return to_failure(exc, "update_user")


def _optional(factory, value):
    """Apply a value object factory unless the field was left out."""
    return factory(value) if value is not None else None
