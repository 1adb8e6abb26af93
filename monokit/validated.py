"""Accumulating validation of several results at once.

A :class:`Validated` is either valid, holding the tuple of every value
collected so far, or invalid, holding every error collected so far. Adding
results or other validations to it keeps gathering values while all goes
well and gathers *all* errors as soon as anything goes wrong, so that the
caller learns about every problem in one go.

Results are written with :class:`Ok` and :class:`Err`::

    v = into_validated(get_name()) + get_age() + get_email()
    name, age, email = v.into_result()   # raises ValidationError on failure
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any as AnyType
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")

__all__ = [
    "Ok",
    "Err",
    "ValidationError",
    "Validated",
    "valid",
    "invalid",
    "into_validated",
]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result holding ``value``."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result holding ``error``."""

    error: E


Result = Union[Ok, Err]


class ValidationError(Exception):
    """Raised when an invalid :class:`Validated` is turned into its values."""

    def __init__(self, errors: list) -> None:
        super().__init__(errors)
        self.errors = list(errors)

    def __str__(self) -> str:
        return f"{len(self.errors)} validation error(s): {self.errors!r}"


@dataclass(frozen=True)
class Validated:
    """Either the values collected so far, or the errors collected so far.

    ``errors`` is ``None`` while the validation is valid; otherwise it holds
    the errors and ``values`` is empty.
    """

    values: tuple = ()
    errors: tuple | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if self.errors is not None:
            object.__setattr__(self, "errors", tuple(self.errors))
            if self.values:
                raise ValueError("an invalid Validated cannot hold values")

    def is_ok(self) -> bool:
        """Return True if no error has been collected."""
        return self.errors is None

    def is_err(self) -> bool:
        """Return True if at least one operation failed."""
        return not self.is_ok()

    def into_result(self) -> tuple:
        """Return the collected values, or raise :class:`ValidationError`."""
        if self.errors is not None:
            raise ValidationError(list(self.errors))
        return self.values

    def __add__(self, other: AnyType) -> "Validated":
        if isinstance(other, (Ok, Err)):
            other = into_validated(other)
        if not isinstance(other, Validated):
            return NotImplemented
        if self.errors is not None and other.errors is not None:
            return Validated(errors=self.errors + other.errors)
        if self.errors is not None:
            return self
        if other.errors is not None:
            return other
        return Validated(values=self.values + other.values)


def valid(*args: AnyType) -> Validated:
    """Return a valid :class:`Validated` holding ``args`` as its values."""
    return Validated(values=args)


def invalid(*args: AnyType) -> Validated:
    """Return an invalid :class:`Validated` holding ``args`` as its errors."""
    return Validated(errors=args)


def into_validated(result: Result) -> Validated:
    """Lift an :class:`Ok` or :class:`Err` into a :class:`Validated`."""
    if isinstance(result, Ok):
        return Validated(values=(result.value,))
    if isinstance(result, Err):
        return Validated(errors=(result.error,))
    raise TypeError(f"expected Ok or Err, got {type(result).__name__}")