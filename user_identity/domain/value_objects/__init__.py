"""Value objects - immutable, self-validating wrappers around primitives."""

from user_identity.domain.value_objects.age import Age
from user_identity.domain.value_objects.email import Email
from user_identity.domain.value_objects.name import Name
from user_identity.domain.value_objects.password_hash import PasswordHash
from user_identity.domain.value_objects.user_id import UserId

__all__ = ["Age", "Email", "Name", "PasswordHash", "UserId"]
