"""Two-variant result type returned by use cases.

Use cases never raise: they return either Success(value) or
Failure(error). Callers branch on `is_success` / `is_failure`, or call
`unwrap()` to get the value and let the error propagate.

Usage:
    result = await create_user(command)
    if result.is_failure:
        log(result.error.error_code)
    else:
        print(result.value.id)
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying the use case's payload."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying a classified error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Success[T], Failure[E]]
