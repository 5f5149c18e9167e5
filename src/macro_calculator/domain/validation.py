"""Accumulating validation results.

Every field of a form is validated on its own and the outcomes are merged
with :func:`combine`, so a caller sees all field errors at once instead of
only the first one.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from macro_calculator.domain.errors import InvalidInputError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class FieldError:
    """A human-readable problem with one form field."""

    field: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Valid(Generic[T]):
    """A successfully validated value."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return ()

    @property
    def messages(self) -> list[str]:
        return []

    def map(self, func: Callable[[T], U]) -> "Valid[U]":
        """Transform the wrapped value."""
        return Valid(func(self.value))

    def unwrap(self) -> T:
        return self.value

    def to_optional(self) -> T | None:
        return self.value


@dataclass(frozen=True)
class Invalid:
    """A failed validation carrying one or more field errors."""

    errors: tuple[FieldError, ...]

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def map(self, func: Callable[[Any], Any]) -> "Invalid":
        return self

    def unwrap(self) -> Any:
        raise InvalidInputError(self.errors)

    def to_optional(self) -> None:
        return None


Validation = Valid[T] | Invalid


def invalid(field: str, message: str) -> Invalid:
    """Build a single-error failure."""
    return Invalid((FieldError(field, message),))


def require(value: T | None, field: str, message: str) -> Validation[T]:
    """Turn an optional value into a validation result."""
    if value is None:
        return invalid(field, message)
    return Valid(value)


def combine(
    build: Callable[..., T], *validations: Validation[Any]
) -> Validation[T]:
    """Merge independent validations.

    Calls ``build`` with every wrapped value when all validations succeed,
    otherwise returns every collected error in argument order.
    """
    errors: list[FieldError] = []
    values: list[Any] = []
    for validation in validations:
        if isinstance(validation, Valid):
            values.append(validation.value)
        else:
            errors.extend(validation.errors)
    if errors:
        return Invalid(tuple(errors))
    return Valid(build(*values))
