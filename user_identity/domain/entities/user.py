"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime

from user_identity.domain.value_objects import Age, Email, Name, PasswordHash, UserId


@dataclass(frozen=True)
class User:
    """
    User domain entity representing the business concept of a user.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework. Every attribute is a value object, so a
    User can never hold an unvalidated field.

    The entity is immutable: `update` returns a new User and leaves the
    original untouched. Persisting the new value is the caller's job.

    Lifecycle:
    - `User.create(...)`  - brand new user, fresh id and timestamps
    - `User.restore(...)` - rebuild a user loaded from storage
    - `user.update(...)`  - partial update, always refreshes updated_at
    """

    id: UserId
    first_name: Name
    last_name: Name
    email: Email
    age: Age
    password_hash: PasswordHash
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Reject raw primitives where value objects are expected."""
        expected = {
            "id": UserId,
            "first_name": Name,
            "last_name": Name,
            "email": Email,
            "age": Age,
            "password_hash": PasswordHash,
            "created_at": datetime,
            "updated_at": datetime,
        }
        for field_name, field_type in expected.items():
            if not isinstance(getattr(self, field_name), field_type):
                raise TypeError(
                    f"User.{field_name} must be a {field_type.__name__}, "
                    f"got {type(getattr(self, field_name)).__name__}"
                )

    @property
    def full_name(self) -> str:
        """First and last name as stored, separated by a space."""
        return f"{self.first_name} {self.last_name}"

    @property
    def full_name_capitalized(self) -> str:
        """Full name with every name part capitalized."""
        return f"{self.first_name.capitalized} {self.last_name.capitalized}"

    @classmethod
    def create(
        cls,
        first_name: Name,
        last_name: Name,
        email: Email,
        age: Age,
        password_hash: PasswordHash,
    ) -> "User":
        """
        Create a brand new user.

        A new UserId is generated and both timestamps are set to the
        same current instant.

        Args:
            first_name: Validated first name
            last_name: Validated last name
            email: Validated, normalized email
            age: Validated age
            password_hash: Hash produced by the password hasher

        Returns:
            New User instance (not yet persisted)
        """
        now = datetime.now(UTC)
        return cls(
            id=UserId.generate(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            age=age,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def restore(
        cls,
        id: UserId,
        first_name: Name,
        last_name: Name,
        email: Email,
        age: Age,
        password_hash: PasswordHash,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """
        Rebuild a user from existing data (e.g. a database row).

        Nothing is generated: id and timestamps are taken as given.
        """
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            age=age,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update(
        self,
        first_name: Name | None = None,
        last_name: Name | None = None,
        email: Email | None = None,
        age: Age | None = None,
        password_hash: PasswordHash | None = None,
    ) -> "User":
        """
        Return a copy of this user with the given fields replaced.

        Fields left as None keep their current value. id and created_at
        never change; updated_at is always refreshed, even when no field
        was supplied.

        Returns:
            New User instance
        """
        return replace(
            self,
            first_name=first_name if first_name is not None else self.first_name,
            last_name=last_name if last_name is not None else self.last_name,
            email=email if email is not None else self.email,
            age=age if age is not None else self.age,
            password_hash=(
                password_hash if password_hash is not None else self.password_hash
            ),
            updated_at=datetime.now(UTC),
        )
