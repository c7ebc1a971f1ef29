"""Email value object - normalized, format-checked email address."""

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[\w\-.+]+@([\w-]+\.)+[\w-]{2,4}$", re.ASCII)


@dataclass(frozen=True)
class Email:
    """
    An email address in canonical form.

    The raw value is trimmed and lowercased before validation, so two
    emails that differ only by case or surrounding whitespace are equal.

    Rules (checked in order):
    1. Must not be blank
    2. At most MAX_LENGTH characters
    3. Must match a local@domain.tld pattern
    """

    value: str

    MAX_LENGTH = 254

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Email must not be blank")

        normalized = self.value.strip().lower()
        object.__setattr__(self, "value", normalized)

        if not normalized:
            raise ValueError("Email must not be blank")

        if len(normalized) > self.MAX_LENGTH:
            raise ValueError(f"Email cannot exceed {self.MAX_LENGTH} characters")

        if not EMAIL_PATTERN.match(normalized):
            raise ValueError("Email format is invalid")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_raw(cls, value: str) -> "Email":
        """
        Create an Email from user input.

        Args:
            value: Raw email string (may contain surrounding whitespace or uppercase)

        Returns:
            Normalized Email instance

        Raises:
            ValueError: If the email is blank, too long or malformed

        Example:
            >>> Email.from_raw("  Jane@Doe.COM ").value
            'jane@doe.com'
        """
        return cls(value)
