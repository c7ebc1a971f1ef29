"""Repository implementations using SQLAlchemy."""

from user_identity.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository"]
