"""User commands and result DTO for the application layer using Pydantic.

Commands only fix the SHAPE of a request (types, required vs optional).
Business validation (email format, age range, password policy, ...) is
done by the domain value objects inside the use cases, so that every
rule lives in exactly one place.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from user_identity.domain.entities.user import User


class CreateUserCommand(BaseModel):
    """Command for creating a new user. The raw password is hashed by the use case."""

    email: str
    age: int
    raw_password: str
    first_name: str
    last_name: str

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "email": "jane@doe.com",
                "age": 25,
                "raw_password": "SecureP@ss123",
                "first_name": "Jane",
                "last_name": "Doe",
            }
        },
    )


class GetUserCommand(BaseModel):
    """Command to fetch an existing user by id."""

    id: str

    model_config = ConfigDict(frozen=True)


class UpdateUserCommand(BaseModel):
    """
    Command to update an existing user.

    Every field except id is optional; only fields that are not None are
    applied. Passing raw_password triggers a policy check and a rehash.
    """

    id: str
    email: str | None = None
    age: int | None = None
    raw_password: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    model_config = ConfigDict(frozen=True)


class UserResultDTO(BaseModel):
    """DTO for returning user data to the caller. Never includes the password hash."""

    id: str
    email: str
    age: int
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserResultDTO":
        """
        Project a domain entity onto the result DTO.

        Names are returned as stored; capitalization for display is left
        to the presentation layer.

        Args:
            user: User domain entity

        Returns:
            UserResultDTO instance
        """
        return cls(
            id=user.id.value,
            email=user.email.value,
            age=user.age.value,
            first_name=user.first_name.value,
            last_name=user.last_name.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
