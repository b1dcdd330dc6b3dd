"""Registries of resources: singleton values looked up by their type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from streamecs.lookup import contains_type, find_type, type_name

T = TypeVar("T")


class ResourceRegistry:
    """A fixed collection of resources, each found by its exact type.

    The set of resources does not change; ``with_`` builds a new registry
    with one more resource in front. Lookups return the first resource of
    the requested type.
    """

    def __init__(self, *args: Any) -> None:
        self._resources: list[Any] = list(args)

    def contains(self, kind: type) -> bool:
        """Tell whether a resource of type ``kind`` is stored."""
        return contains_type(self._resources, kind)

    def get(self, kind: type[T]) -> T | None:
        """Return the resource of type ``kind``, or None if there is none."""
        return find_type(self._resources, kind)

    def provide(self, kind: type[T]) -> T:
        """Return the resource of type ``kind``; raise KeyError if it is missing."""
        for resource in self._resources:
            if type(resource) is kind:
                return resource
        raise KeyError(
            f'resource of type "{type_name(kind)}" should exist by trait definition'
        )

    def with_(self, resource: Any) -> ResourceRegistry:
        """Return a new registry holding ``resource`` ahead of these ones."""
        return type(self)(resource, *self._resources)

    def is_empty(self) -> bool:
        """Tell whether no resource is stored."""
        return len(self) == 0

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the stored resources in order."""
        return iter(list(self._resources))

    def __repr__(self) -> str:
        inner = ", ".join(repr(resource) for resource in self._resources)
        return f"{type(self).__name__}({inner})"


class MutableResourceRegistry(ResourceRegistry):
    """A resource registry whose resources can be inserted and removed."""

    def _position(self, kind: type) -> int | None:
        return next(
            (at for at, resource in enumerate(self._resources) if type(resource) is kind),
            None,
        )

    def insert(self, resource: T) -> T | None:
        """Store ``resource``, returning the one of its type it replaced, if any."""
        at = self._position(type(resource))
        if at is None:
            self._resources.append(resource)
            return None
        previous = self._resources[at]
        self._resources[at] = resource
        return previous

    def try_insert(self, resource: T) -> T | None:
        """Store ``resource`` like ``insert``; this registry never refuses one."""
        return self.insert(resource)

    def remove(self, kind: type[T]) -> T | None:
        """Remove and return the resource of type ``kind``, or None if absent."""
        at = self._position(kind)
        if at is None:
            return None
        return self._resources.pop(at)

    def clear(self) -> None:
        """Remove every resource."""
        self._resources.clear()