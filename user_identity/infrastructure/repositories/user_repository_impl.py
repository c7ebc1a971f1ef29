"""User repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_identity.application.exceptions import UserAlreadyExistsError
from user_identity.domain.entities.user import User
from user_identity.domain.repositories.user_repository import IUserRepository
from user_identity.domain.value_objects import Email, UserId
from user_identity.infrastructure.persistence.models.user_model import UserModel

logger = logging.getLogger(__name__)


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    This class contains all database-specific code and depends on:
    - SQLAlchemy (infrastructure)
    - UserModel (infrastructure ORM mapping)

    It implements the IUserRepository interface (domain) and returns
    domain entities, never exposing ORM models to the application layer.

    Every call runs in its own short session; `save` commits before
    returning. Email uniqueness is guaranteed by the unique index on
    users.email, which also closes the exists-then-save race between two
    concurrent registrations.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def exists_by_email(self, email: Email) -> bool:
        """Check if email is already registered."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(UserModel.id).where(UserModel.email == email.value)
            )
            return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> User:
        """
        Insert a new user or update an existing one.

        Raises:
            UserAlreadyExistsError: If another row already holds the email
        """
        async with self._session_factory() as session:
            user_model = await session.get(UserModel, user.id.value)

            if user_model is None:
                user_model = UserModel.from_entity(user)
                session.add(user_model)
            else:
                user_model.apply(user)

            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.warning(f"Unique constraint violated while saving user {user.id}")
                raise UserAlreadyExistsError(user.email) from exc

            return user_model.to_entity()

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID."""
        async with self._session_factory() as session:
            user_model = await session.get(UserModel, user_id.value)

            if user_model is None:
                return None

            return user_model.to_entity()
