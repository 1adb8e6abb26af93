"""Monoids: semigroups that also have an empty (identity) value.

The empty value of a kind of value can be asked for by type with
:func:`empty`, or derived from an existing value with :func:`empty_like`.
``None`` is the empty value of an optional value, so combining anything with
``None`` leaves it unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from numbers import Number
from typing import Any as AnyType
from typing import TypeVar

from monokit import semigroup
from monokit.semigroup import All, Any, Max, Min, Product

T = TypeVar("T")

__all__ = ["empty", "empty_like", "combine_n", "combine_all"]

_MISSING = object()

_PLAIN_CONTAINERS = (str, bytes, list, set, frozenset, dict)


def _is_numeric_type(kind: type) -> bool:
    return issubclass(kind, Number) and not issubclass(kind, bool)


def _empty_from_spec(spec: AnyType) -> AnyType:
    """Build an empty value from a tuple element spec: a kind or (kind, inner)."""
    if isinstance(spec, tuple):
        if len(spec) != 2:
            raise ValueError("a tuple element spec must be a kind or a (kind, inner) pair")
        kind, inner = spec
        return empty(kind, inner)
    return empty(spec)


def empty(kind: AnyType, inner: AnyType = None) -> AnyType:
    """Return the empty value of ``kind``.

    ``inner`` gives the value type for the :class:`All`, :class:`Any` and
    :class:`Product` wrappers (``bool`` for All and Any, ``int`` for Product
    when omitted), and the element kinds for ``tuple``: a sequence whose items
    are each a kind or a ``(kind, inner)`` pair.
    """
    if kind is None or kind is type(None):
        return None

    if kind is All:
        value_kind = bool if inner is None else inner
        if value_kind is bool:
            return All(True)
        if isinstance(value_kind, type) and issubclass(value_kind, int):
            return All(~0)
        raise TypeError(f"All has no empty value for {getattr(value_kind, '__name__', value_kind)}")

    if kind is Any:
        value_kind = bool if inner is None else inner
        if value_kind is bool:
            return Any(False)
        if isinstance(value_kind, type) and issubclass(value_kind, int):
            return Any(0)
        raise TypeError(f"Any has no empty value for {getattr(value_kind, '__name__', value_kind)}")

    if kind is Product:
        value_kind = int if inner is None else inner
        if isinstance(value_kind, type) and _is_numeric_type(value_kind):
            return Product(value_kind(1))
        raise TypeError(
            f"Product has no empty value for {getattr(value_kind, '__name__', value_kind)}"
        )

    if kind is Max or kind is Min:
        raise TypeError(f"{kind.__name__} is a semigroup without an empty value")

    if kind is tuple:
        if inner is None:
            return ()
        return tuple(_empty_from_spec(spec) for spec in inner)

    if not isinstance(kind, type):
        raise TypeError(f"{kind!r} is not a kind of value")

    if issubclass(kind, bool):
        raise TypeError("plain booleans have no empty value; use All or Any")

    if _is_numeric_type(kind):
        return kind()

    if issubclass(kind, _PLAIN_CONTAINERS):
        return kind()

    own_empty = getattr(kind, "empty", None)
    if callable(own_empty):
        return own_empty()

    raise TypeError(f"{kind.__name__} is not a monoid")


def empty_like(value: AnyType) -> AnyType:
    """Return the empty value of the same kind as ``value``."""
    if value is None:
        return None
    if isinstance(value, (All, Any, Product)):
        return empty(type(value), type(value.value))
    if isinstance(value, (Max, Min)):
        return empty(type(value))
    if isinstance(value, tuple):
        return tuple(empty_like(item) for item in value)
    return empty(type(value))


def combine_n(value: T, times: int, zero: AnyType = _MISSING) -> T:
    """Return ``value`` combined with itself ``times`` times.

    With ``times`` of 0 the empty value is returned: ``zero`` when given,
    otherwise the empty value of the same kind as ``value``.
    """
    if times < 0:
        raise ValueError("times must not be negative")
    if times == 0:
        return empty_like(value) if zero is _MISSING else zero
    return semigroup.combine_n(value, times)


def combine_all(xs: Iterable[T], zero: AnyType = _MISSING) -> T:
    """Combine every element of ``xs``, starting from the empty value.

    ``zero`` is the empty value to start from; when omitted it is derived
    from the first element, and an empty ``xs`` is then an error.
    """
    iterator = iter(xs)
    if zero is not _MISSING:
        return reduce(semigroup.combine, iterator, zero)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError(
            "cannot tell the empty value of an empty sequence; pass zero"
        ) from None
    start = semigroup.combine(empty_like(first), first)
    return reduce(semigroup.combine, iterator, start)