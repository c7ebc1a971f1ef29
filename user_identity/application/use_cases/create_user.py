"""Create user use case."""

import logging

from user_identity.application.dtos.user_dto import CreateUserCommand, UserResultDTO
from user_identity.application.exceptions import UserAlreadyExistsError, UserError
from user_identity.application.ports import ICreateUserUseCase
from user_identity.application.result import Result, Success
from user_identity.application.use_cases.base import to_failure
from user_identity.domain.entities.user import User
from user_identity.domain.repositories.user_repository import IUserRepository
from user_identity.domain.services.password_hasher import IPasswordHasher
from user_identity.domain.services.password_policy import PasswordPolicyService
from user_identity.domain.value_objects import Age, Email, Name

logger = logging.getLogger(__name__)


class CreateUserUseCase(ICreateUserUseCase):
    """
    Register a new user.

    Pipeline (stops at the first failure):
    1. Normalize and validate the email
    2. Reject the email if it is already registered
    3. Check the raw password against the password policy
    4. Hash the password
    5. Build the User entity (names and age validated here)
    6. Persist it and return the stored user

    A duplicate email or a rejected password never reaches the hasher.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_policy: PasswordPolicyService,
        password_hasher: IPasswordHasher,
    ):
        """
        Initialize use case with its ports.

        Args:
            user_repository: User store (abstraction, not concrete class)
            password_policy: Password policy domain service
            password_hasher: Password hashing service (abstraction)
        """
        self._user_repository = user_repository
        self._password_policy = password_policy
        self._password_hasher = password_hasher

    async def invoke(
        self, command: CreateUserCommand
    ) -> Result[UserResultDTO, UserError]:
        try:
            email = Email.from_raw(command.email)

            if await self._user_repository.exists_by_email(email):
                raise UserAlreadyExistsError(email)

            self._password_policy.is_valid(command.raw_password)
            password_hash = self._password_hasher.hash_password(command.raw_password)

            user = User.create(
                first_name=Name.from_raw(command.first_name),
                last_name=Name.from_raw(command.last_name),
                email=email,
                age=Age.from_raw(command.age),
                password_hash=password_hash,
            )
            saved_user = await self._user_repository.save(user)

            logger.info(f"Created user {saved_user.id}")
            return Success(UserResultDTO.from_entity(saved_user))
        except Exception as exc:
            return to_failure(exc, "create_user")
