"""PasswordHash value object.

Wraps the output of a password hasher. The value is opaque to the domain:
it is never the plaintext password, and it is never shown in logs or
reprs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordHash:
    """Hashed password produced by an IPasswordHasher implementation."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Password must not be blank")

    def __repr__(self) -> str:
        return "PasswordHash(***)"

    def __str__(self) -> str:
        return "PasswordHash(***)"

    @classmethod
    def from_raw(cls, hashed: str) -> "PasswordHash":
        """
        Wrap an already-hashed password.

        Args:
            hashed: Hash string as returned by the hasher

        Raises:
            ValueError: If the hash is blank
        """
        return cls(hashed)
