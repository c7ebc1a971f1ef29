"""Age value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Age:
    """Age of a user in whole years, between MIN_AGE and MAX_AGE inclusive."""

    value: int

    MIN_AGE = 13
    MAX_AGE = 120

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"{self.value!r} is not a valid age")

        if not self.MIN_AGE <= self.value <= self.MAX_AGE:
            raise ValueError(
                f"{self.value} is not between {self.MIN_AGE} and {self.MAX_AGE}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_raw(cls, value: int) -> "Age":
        return cls(value)
