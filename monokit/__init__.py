"""Semigroups, monoids and their laws, error-accumulating validation and field paths."""

__version__ = "0.1.0"

__all__ = ["semigroup", "monoid", "laws", "validated", "path"]