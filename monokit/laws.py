"""Laws that semigroup and monoid values are expected to obey.

Each function checks one law for the given values and returns whether it
holds, which makes them convenient as property-based test predicates.
"""

from __future__ import annotations

from typing import Any as AnyType

from monokit.monoid import empty_like
from monokit.semigroup import combine

__all__ = ["associativity", "left_identity", "right_identity"]

_MISSING = object()


def associativity(a: AnyType, b: AnyType, c: AnyType) -> bool:
    """Check that ``(a <> b) <> c == a <> (b <> c)``."""
    return combine(combine(a, b), c) == combine(a, combine(b, c))


def left_identity(a: AnyType, zero: AnyType = _MISSING) -> bool:
    """Check that ``empty <> a == a``.

    ``zero`` is the empty value to use; by default it is derived from ``a``.
    """
    identity = empty_like(a) if zero is _MISSING else zero
    return combine(identity, a) == a


def right_identity(a: AnyType, zero: AnyType = _MISSING) -> bool:
    """Check that ``a <> empty == a``.

    ``zero`` is the empty value to use; by default it is derived from ``a``.
    """
    identity = empty_like(a) if zero is _MISSING else zero
    return combine(a, identity) == a