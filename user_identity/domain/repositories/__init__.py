"""Repository interfaces - define contracts for data access."""

from user_identity.domain.repositories.user_repository import IUserRepository

__all__ = ["IUserRepository"]
