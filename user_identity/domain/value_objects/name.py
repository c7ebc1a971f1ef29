"""Name value object - a first or last name of a user."""

import re
import unicodedata
from dataclasses import dataclass

# Separators allowed between letters
_SEPARATORS = re.compile(r"[\s'-]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Name:
    """
    A person's name (first name or last name).

    Surrounding whitespace is trimmed before validation.

    Raises:
        ValueError: If the name is too long, blank, or contains characters
            other than letters, spaces, hyphens and apostrophes
    """

    value: str

    MAX_LENGTH = 128

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("Name must not be blank")

        trimmed = self.value.strip()
        object.__setattr__(self, "value", trimmed)

        if len(trimmed) > self.MAX_LENGTH:
            raise ValueError("Name is too long")

        if not trimmed:
            raise ValueError("Name must not be blank")

        if not all(_is_name_char(char) for char in trimmed):
            raise ValueError("Name format is invalid")

    def __str__(self) -> str:
        return self.value

    @property
    def capitalized(self) -> str:
        """
        Name with each whitespace-separated part capitalized.

        Only the first character of a part is touched, and only when it is
        lowercase: "hugo boss" becomes "Hugo Boss", "mcDonald" becomes "McDonald".
        """
        return " ".join(_capitalize_part(part) for part in _WHITESPACE.split(self.value))

    @classmethod
    def from_raw(cls, value: str) -> "Name":
        """Create a Name from user input (trimmed, then validated)."""
        return cls(value)


def _is_name_char(char: str) -> bool:
    # Letter categories only (L*); "½" and "Ⅻ" are numbers
    return unicodedata.category(char).startswith("L") or bool(_SEPARATORS.fullmatch(char))


def _capitalize_part(part: str) -> str:
    if part[:1].islower():
        return part[:1].title() + part[1:]
    return part
