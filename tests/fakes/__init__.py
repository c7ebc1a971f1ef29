"""Fake implementations for testing."""

from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.user_repository_fake import FakeUserRepository

__all__ = ["FakePasswordHasher", "FakeUserRepository"]
