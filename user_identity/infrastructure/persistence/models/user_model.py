"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_identity.domain.entities.user import User
from user_identity.domain.value_objects import Age, Email, Name, PasswordHash, UserId
from user_identity.infrastructure.persistence.database import Base


class UserModel(Base):
    """
    SQLAlchemy ORM model for users table.

    This is an INFRASTRUCTURE detail that maps domain entities to database rows.
    The domain layer never imports this class.

    Timestamps are owned by the domain (User.create / User.update) and stored
    as given, so no server-side defaults are used here.
    """

    __tablename__ = "users"

    # Primary key (UUID string generated by the domain)
    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # User information
    email: Mapped[str] = mapped_column(
        String(254),
        unique=True,
        index=True,
        nullable=False,
    )
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    # Authentication
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        """String representation of UserModel."""
        return f"UserModel(id={self.id!r}, email={self.email!r})"

    def to_entity(self) -> User:
        """
        Convert ORM model to domain entity.

        Stored values go back through the value object factories, so a
        corrupted row surfaces as a ValueError instead of an invalid User.

        Returns:
            User domain entity
        """
        return User.restore(
            id=UserId.from_raw(self.id),
            first_name=Name.from_raw(self.first_name),
            last_name=Name.from_raw(self.last_name),
            email=Email.from_raw(self.email),
            age=Age.from_raw(self.age),
            password_hash=PasswordHash.from_raw(self.password_hash),
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Create ORM model from domain entity.

        Args:
            user: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = UserModel(id=user.id.value)
        model.apply(user)
        return model

    def apply(self, user: User) -> None:
        """Copy every mutable field of the entity onto this row."""
        self.email = user.email.value
        self.first_name = user.first_name.value
        self.last_name = user.last_name.value
        self.age = user.age.value
        self.password_hash = user.password_hash.value
        self.created_at = user.created_at
        self.updated_at = user.updated_at


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
