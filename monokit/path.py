"""Reusable, composable paths into nested records.

A :class:`Path` names a chain of fields, such as ``dimensions.height``. It
works on any object that has those fields, whatever its type, so a single
path can read from differently typed records of the same shape::

    height = path("dimensions") + path("height")
    height.get(dog)        # dog.dimensions.height
    height.set(dog, 13)    # dog.dimensions.height = 13

Fields are looked up as attributes, or as keys for mappings.
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any as AnyType

__all__ = ["PathError", "Path", "path"]


class PathError(LookupError):
    """Raised when a path cannot be followed through an object."""


def _check_name(name: AnyType) -> str:
    if not isinstance(name, str):
        raise TypeError(f"field names must be strings, not {type(name).__name__}")
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"only named field access is supported, not {name!r}")
    return name


def _field(obj: AnyType, name: str, walked: tuple[str, ...]) -> AnyType:
    if isinstance(obj, Mapping):
        try:
            return obj[name]
        except KeyError:
            pass
    else:
        try:
            return getattr(obj, name)
        except AttributeError:
            pass
    where = ".".join(walked) or "the root"
    raise PathError(f"{type(obj).__name__} at {where} has no field {name!r}")


@dataclass(frozen=True)
class Path:
    """A non-empty chain of field names."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        names = tuple(_check_name(name) for name in self.names)
        if not names:
            raise ValueError("a path needs at least one field name")
        object.__setattr__(self, "names", names)

    def _walk(self, obj: AnyType, names: tuple[str, ...]) -> AnyType:
        current = obj
        for position, name in enumerate(names):
            current = _field(current, name, names[:position])
        return current

    def get(self, obj: AnyType) -> AnyType:
        """Return the value this path points to inside ``obj``."""
        return self._walk(obj, self.names)

    def set(self, obj: AnyType, value: AnyType) -> None:
        """Replace the value this path points to inside ``obj``.

        The target field must already exist.
        """
        *parents, last = self.names
        parent = self._walk(obj, tuple(parents))
        # Checks that the field exists before writing it.
        _field(parent, last, tuple(parents))
        if isinstance(parent, Mapping):
            if not isinstance(parent, MutableMapping):
                raise PathError(f"cannot assign {self}: mapping is read-only")
            parent[last] = value
            return
        try:
            setattr(parent, last, value)
        except AttributeError as exc:
            raise PathError(f"cannot assign {self}: {exc}") from exc

    def __add__(self, other: AnyType) -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.names + other.names)

    def __str__(self) -> str:
        return ".".join(self.names)


def path(spec: str) -> Path:
    """Build a :class:`Path` from dotted field names, like ``"a.b.c"``."""
    if not isinstance(spec, str):
        raise TypeError(f"a path spec must be a string, not {type(spec).__name__}")
    if not spec.strip():
        raise ValueError("a path needs at least one field name")
    return Path(tuple(part.strip() for part in spec.split(".")))