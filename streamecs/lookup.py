"""Lookups of values by their exact type within a collection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def contains_type(items: Iterable[Any], kind: type) -> bool:
    """Tell whether any item is exactly of type ``kind``."""
    return any(type(item) is kind for item in items)


def find_type(items: Iterable[Any], kind: type[T]) -> T | None:
    """Return the first item that is exactly of type ``kind``, or None."""
    return next((item for item in items if type(item) is kind), None)


def type_name(kind: Any) -> str:
    """Return the qualified name of a type, or of a value's type."""
    if not isinstance(kind, type):
        kind = type(kind)
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"