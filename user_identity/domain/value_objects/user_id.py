"""UserId value object."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Unique identifier of a user. Opaque, non-blank string."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("UserId must not be blank")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "UserId":
        """Create a new UserId backed by a random UUID."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_raw(cls, value: str) -> "UserId":
        """
        Create a UserId from an existing string.

        Raises:
            ValueError: If the value is blank
        """
        return cls(value)
