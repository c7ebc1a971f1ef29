"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakePasswordHasher, FakeUserRepository)
- Tests run fast (no real crypto, no database)
- Tests are isolated (each test gets fresh fakes)
"""

import pytest

from user_identity.application.use_cases import (
    CreateUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from user_identity.domain.entities.user import User
from user_identity.domain.services.password_policy import PasswordPolicyService
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.user_repository_fake import FakeUserRepository
from tests.fakes.users import ANOTHER_USER_ID, make_user


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """
    Provide a FakePasswordHasher for tests.

    This fake hasher is fast and predictable, making tests easier to write.
    """
    return FakePasswordHasher()


@pytest.fixture
def password_policy() -> PasswordPolicyService:
    return PasswordPolicyService()


@pytest.fixture
def sample_user() -> User:
    """
    A stored user with fixed timestamps in the past.

    The password_hash uses the FakePasswordHasher format: "HASHED:OldP@ss123"
    """
    return make_user()


@pytest.fixture
def another_user() -> User:
    """Create another stored user for testing."""
    return make_user(
        id=ANOTHER_USER_ID,
        first_name="john",
        last_name="smith",
        email="john@smith.com",
        age=40,
        password_hash="HASHED:An0ther!Pass",
    )


@pytest.fixture
def fake_user_repository() -> FakeUserRepository:
    """Provide a fresh, empty FakeUserRepository for each test."""
    return FakeUserRepository()


@pytest.fixture
def fake_user_repository_with_users(sample_user, another_user) -> FakeUserRepository:
    """
    Provide a FakeUserRepository pre-populated with users.

    Useful for testing operations on existing data.
    """
    return FakeUserRepository(initial_data=[sample_user, another_user])


@pytest.fixture
def create_user_use_case(fake_user_repository, password_policy, fake_password_hasher):
    """
    Provide a CreateUserUseCase with fake dependencies.

    - No database (FakeUserRepository)
    - No real crypto (FakePasswordHasher)
    """
    return CreateUserUseCase(
        user_repository=fake_user_repository,
        password_policy=password_policy,
        password_hasher=fake_password_hasher,
    )


@pytest.fixture
def get_user_use_case(fake_user_repository_with_users):
    return GetUserUseCase(user_repository=fake_user_repository_with_users)


@pytest.fixture
def update_user_use_case(
    fake_user_repository_with_users, password_policy, fake_password_hasher
):
    """Provide an UpdateUserUseCase over the pre-populated repository."""
    return UpdateUserUseCase(
        user_repository=fake_user_repository_with_users,
        password_policy=password_policy,
        password_hasher=fake_password_hasher,
    )
