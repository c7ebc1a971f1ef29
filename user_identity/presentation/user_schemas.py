"""HTTP request and response models for the users API.

Request models only check the shape of the body. Email format, age range,
name characters and password strength are checked by the use cases, so an
invalid value comes back as 400 INVALID_USER_DATA rather than 422.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from user_identity.application.dtos.user_dto import (
    CreateUserCommand,
    UpdateUserCommand,
    UserResultDTO,
)
from user_identity.domain.value_objects import Name


class CreateUserRequest(BaseModel):
    """Body of POST /users."""

    email: str = Field(..., description="User's email address")
    age: int = Field(..., description="Age in years (13-120)")
    password: str = Field(..., description="Plain text password, hashed before storage")
    first_name: str
    last_name: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@doe.com",
                "age": 25,
                "password": "SecureP@ss123",
                "first_name": "jane",
                "last_name": "doe",
            }
        }
    )

    def to_command(self) -> CreateUserCommand:
        return CreateUserCommand(
            email=self.email,
            age=self.age,
            raw_password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class UpdateUserRequest(BaseModel):
    """Body of PUT /users/{user_id}. Omitted fields are left unchanged."""

    email: str | None = None
    age: int | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "age": 26,
                "last_name": "smith",
            }
        }
    )

    def to_command(self, user_id: str) -> UpdateUserCommand:
        return UpdateUserCommand(
            id=user_id,
            email=self.email,
            age=self.age,
            raw_password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class UserResponse(BaseModel):
    """User as returned by the API, names capitalized for display."""

    id: str
    email: str
    age: int
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, dto: UserResultDTO) -> "UserResponse":
        return cls(
            id=dto.id,
            email=dto.email,
            age=dto.age,
            first_name=Name(dto.first_name).capitalized,
            last_name=Name(dto.last_name).capitalized,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
