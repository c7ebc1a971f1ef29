"""User repository interface."""

from abc import ABC, abstractmethod

from user_identity.domain.entities.user import User
from user_identity.domain.value_objects import Email, UserId


class IUserRepository(ABC):
    """
    User store interface.

    This interface belongs to the DOMAIN layer and defines the contract
    for user persistence without any implementation details. Use cases
    depend on it; the SQLAlchemy adapter (and the in-memory fake used in
    tests) implement it.

    Implementations are expected to make a completed `save` visible to
    any later `find_by_id` / `exists_by_email` on the same key, and to
    enforce email uniqueness themselves (e.g. a unique index): the
    exists-then-save sequence in the use cases is not atomic.
    """

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """
        Check if an email is already registered.

        Args:
            email: Normalized email to look up

        Returns:
            True if a user with this email exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert or update a user.

        Args:
            user: The entity to persist (new or updated)

        Returns:
            The user as stored
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """
        Retrieve a user by its identifier.

        Args:
            user_id: The unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass
