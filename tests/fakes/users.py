"""Stored users shared by the unit tests."""

from datetime import UTC, datetime

from user_identity.domain.entities.user import User
from user_identity.domain.value_objects import Age, Email, Name, PasswordHash, UserId

SAMPLE_USER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
ANOTHER_USER_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"
STORED_AT = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def make_user(
    id: str = SAMPLE_USER_ID,
    first_name: str = "jane",
    last_name: str = "doe",
    email: str = "jane@doe.com",
    age: int = 25,
    password_hash: str = "HASHED:OldP@ss123",
) -> User:
    """Build a user as if loaded from storage, with fixed past timestamps."""
    return User.restore(
        id=UserId(id),
        first_name=Name(first_name),
        last_name=Name(last_name),
        email=Email(email),
        age=Age(age),
        password_hash=PasswordHash(password_hash),
        created_at=STORED_AT,
        updated_at=STORED_AT,
    )
