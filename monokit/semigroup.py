"""Semigroups: values that can be combined with an associative operation.

The free function :func:`combine` knows how to combine the common built-in
types:

* ``None`` acts as an absent value: combining it with anything yields the
  other side unchanged.
* numbers are added;
* strings, bytes and lists are concatenated;
* sets are united;
* dicts are merged, combining the values of keys present on both sides;
* tuples are combined element by element and must have the same length.

Objects that provide their own ``combine(other)`` method (such as the
:class:`Max`, :class:`Min`, :class:`Product`, :class:`All` and :class:`Any`
wrappers) are combined by calling it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from numbers import Number
from typing import Any as AnyType
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = [
    "Max",
    "Min",
    "Product",
    "All",
    "Any",
    "combine",
    "combine_n",
    "combine_all_option",
]


def _require_same(self: object, other: object) -> None:
    if type(other) is not type(self):
        raise TypeError(
            f"cannot combine {type(self).__name__} with {type(other).__name__}"
        )


@dataclass(frozen=True, order=True)
class Max(Generic[T]):
    """Wrapper whose combination keeps the larger value."""

    value: T

    def combine(self, other: "Max[T]") -> "Max[T]":
        _require_same(self, other)
        if self.value < other.value:
            return Max(other.value)
        return Max(self.value)


@dataclass(frozen=True, order=True)
class Min(Generic[T]):
    """Wrapper whose combination keeps the smaller value."""

    value: T

    def combine(self, other: "Min[T]") -> "Min[T]":
        _require_same(self, other)
        if self.value < other.value:
            return Min(self.value)
        return Min(other.value)


@dataclass(frozen=True, order=True)
class Product(Generic[T]):
    """Wrapper whose combination multiplies the values."""

    value: T

    def combine(self, other: "Product[T]") -> "Product[T]":
        _require_same(self, other)
        return Product(self.value * other.value)


@dataclass(frozen=True, order=True)
class All(Generic[T]):
    """Wrapper whose combination is a bitwise (or logical) and."""

    value: T

    def combine(self, other: "All[T]") -> "All[T]":
        _require_same(self, other)
        return All(self.value & other.value)


@dataclass(frozen=True, order=True)
class Any(Generic[T]):
    """Wrapper whose combination is a bitwise (or logical) or."""

    value: T

    def combine(self, other: "Any[T]") -> "Any[T]":
        _require_same(self, other)
        return Any(self.value | other.value)


def _mismatch(left: object, right: object) -> TypeError:
    return TypeError(
        f"cannot combine {type(left).__name__} with {type(right).__name__}"
    )


def _is_number(value: object) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def combine(left: AnyType, right: AnyType) -> AnyType:
    """Combine two values of the same kind and return the result."""
    if left is None:
        return right
    if right is None:
        return left

    method = getattr(left, "combine", None)
    if callable(method):
        return method(right)

    if isinstance(left, bool) or isinstance(right, bool):
        raise TypeError("plain booleans have no combination; use All or Any")

    if _is_number(left):
        if not _is_number(right):
            raise _mismatch(left, right)
        return left + right

    if isinstance(left, (str, bytes, list)):
        if not isinstance(right, type(left)):
            raise _mismatch(left, right)
        return left + right

    if isinstance(left, (set, frozenset)):
        if not isinstance(right, (set, frozenset)):
            raise _mismatch(left, right)
        return type(left)(left | right)

    if isinstance(left, Mapping):
        if not isinstance(right, Mapping):
            raise _mismatch(left, right)
        merged = dict(left)
        for key, value in right.items():
            merged[key] = combine(merged[key], value) if key in merged else value
        return merged

    if isinstance(left, tuple):
        if not isinstance(right, tuple):
            raise _mismatch(left, right)
        if len(left) != len(right):
            raise ValueError(
                f"cannot combine tuples of length {len(left)} and {len(right)}"
            )
        return tuple(combine(a, b) for a, b in zip(left, right))

    raise TypeError(f"{type(left).__name__} is not a semigroup")


def combine_n(value: T, times: int) -> T:
    """Return ``value`` combined with itself ``times`` times.

    ``times`` of 0 or 1 both give ``value`` back unchanged.
    """
    if times < 0:
        raise ValueError("times must not be negative")
    result = value
    for _ in range(1, times):
        result = combine(value, result)
    return result


def combine_all_option(xs: Iterable[T]) -> T | None:
    """Combine every element of ``xs`` in order; ``None`` if there are none."""
    iterator = iter(xs)
    try:
        first = next(iterator)
    except StopIteration:
        return None
    return reduce(combine, iterator, first)