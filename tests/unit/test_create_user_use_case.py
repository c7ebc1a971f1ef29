"""Unit tests for CreateUserUseCase.

These tests use the fake repository and hasher to test the use case in
isolation without a database.
"""

import pytest

from user_identity.application.dtos.user_dto import CreateUserCommand
from user_identity.application.exceptions import (
    InvalidUserDataError,
    UserAlreadyExistsError,
    UserUnknownError,
)
from user_identity.application.use_cases import CreateUserUseCase
from user_identity.domain.value_objects import Email
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.user_repository_fake import FakeUserRepository


pytestmark = pytest.mark.unit


def _command(**overrides) -> CreateUserCommand:
    data = {
        "email": "jane@doe.com",
        "age": 25,
        "raw_password": "SecureP@ss123",
        "first_name": "jane",
        "last_name": "doe",
    }
    data.update(overrides)
    return CreateUserCommand(**data)


class TestCreateUserSuccess:
    @pytest.mark.asyncio
    async def test_create_user_success(self, create_user_use_case, fake_user_repository):
        """Test successful user creation."""
        # Act
        result = await create_user_use_case.invoke(_command())

        # Assert
        assert result.is_success
        dto = result.value
        assert dto.email == "jane@doe.com"
        assert dto.age == 25
        assert dto.id
        assert dto.created_at == dto.updated_at
        assert fake_user_repository.count() == 1
        assert fake_user_repository.save_calls == 1

    @pytest.mark.asyncio
    async def test_names_are_returned_as_stored(self, create_user_use_case):
        """Capitalization is left to the presentation layer."""
        result = await create_user_use_case.invoke(_command())

        assert result.value.first_name == "jane"
        assert result.value.last_name == "doe"

    @pytest.mark.asyncio
    async def test_email_is_normalized(self, create_user_use_case):
        result = await create_user_use_case.invoke(_command(email="  Jane@Doe.COM "))

        assert result.value.email == "jane@doe.com"

    @pytest.mark.asyncio
    async def test_password_is_hashed_before_storage(
        self, create_user_use_case, fake_user_repository, fake_password_hasher
    ):
        """Test that only the hash reaches the store."""
        # Act
        await create_user_use_case.invoke(_command())

        # Assert
        stored = fake_user_repository.get_all_sync()[0]
        assert fake_password_hasher.calls == 1
        assert fake_password_hasher.extract_plain_password(stored.password_hash) == "SecureP@ss123"

    @pytest.mark.asyncio
    async def test_use_case_is_callable(self, create_user_use_case):
        result = await create_user_use_case(_command())

        assert result.is_success


class TestCreateUserFailures:
    @pytest.mark.asyncio
    async def test_duplicate_email(
        self, password_policy, fake_password_hasher, sample_user
    ):
        """Test that a registered email is rejected before hashing."""
        # Arrange
        repository = FakeUserRepository(initial_data=[sample_user])
        use_case = CreateUserUseCase(repository, password_policy, fake_password_hasher)

        # Act
        result = await use_case.invoke(_command())

        # Assert
        assert result.is_failure
        assert isinstance(result.error, UserAlreadyExistsError)
        assert result.error.email == Email("jane@doe.com")
        assert fake_password_hasher.calls == 0
        assert repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_duplicate_email_differing_by_case(
        self, password_policy, fake_password_hasher, sample_user
    ):
        repository = FakeUserRepository(initial_data=[sample_user])
        use_case = CreateUserUseCase(repository, password_policy, fake_password_hasher)

        result = await use_case.invoke(_command(email="JANE@DOE.COM"))

        assert isinstance(result.error, UserAlreadyExistsError)

    @pytest.mark.asyncio
    async def test_weak_password_is_not_hashed(
        self, create_user_use_case, fake_password_hasher, fake_user_repository
    ):
        result = await create_user_use_case.invoke(_command(raw_password="weak"))

        assert isinstance(result.error, InvalidUserDataError)
        assert result.error.message == "Password must be at least 8 characters"
        assert fake_password_hasher.calls == 0
        assert fake_user_repository.save_calls == 0

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"email": "not-an-email"}, "Email format is invalid"),
            ({"email": "  "}, "Email must not be blank"),
            ({"age": 12}, "12 is not between 13 and 120"),
            ({"first_name": "j4ne"}, "Name format is invalid"),
            ({"last_name": ""}, "Name must not be blank"),
        ],
    )
    @pytest.mark.asyncio
    async def test_invalid_data(
        self, create_user_use_case, fake_user_repository, overrides, message
    ):
        result = await create_user_use_case.invoke(_command(**overrides))

        assert isinstance(result.error, InvalidUserDataError)
        assert result.error.message == message
        assert fake_user_repository.count() == 0

    @pytest.mark.asyncio
    async def test_store_failure_is_unknown_error(
        self, password_policy, fake_password_hasher
    ):
        """Test that an unexpected store failure is returned, not raised."""
        # Arrange
        repository = FakeUserRepository(save_error=RuntimeError("connection lost"))
        use_case = CreateUserUseCase(repository, password_policy, fake_password_hasher)

        # Act
        result = await use_case.invoke(_command())

        # Assert
        assert isinstance(result.error, UserUnknownError)
        assert result.error.message == "connection lost"

    @pytest.mark.asyncio
    async def test_hasher_failure_is_unknown_error(
        self, fake_user_repository, password_policy
    ):
        hasher = FakePasswordHasher(error=RuntimeError("hasher down"))
        use_case = CreateUserUseCase(fake_user_repository, password_policy, hasher)

        result = await use_case.invoke(_command())

        assert isinstance(result.error, UserUnknownError)
        assert fake_user_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_unknown_error_is_logged(self, password_policy, fake_password_hasher, caplog):
        repository = FakeUserRepository(exists_error=RuntimeError("timeout"))
        use_case = CreateUserUseCase(repository, password_policy, fake_password_hasher)

        with caplog.at_level("ERROR"):
            await use_case.invoke(_command())

        assert "create_user failed unexpectedly: timeout" in caplog.text
        assert "SecureP@ss123" not in caplog.text
