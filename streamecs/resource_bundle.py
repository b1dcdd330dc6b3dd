"""Resource bundles: one resource, or a tuple of bundles handled together.

A bundle is either a single resource or a non-empty tuple whose items are
bundles themselves. Operations that take ``kinds`` take the same shape made
of types instead of values. Results mirror the shape of what was given.
"""

from __future__ import annotations

from typing import Any

from streamecs.resources import MutableResourceRegistry, ResourceRegistry


def _parts(bundle: tuple[Any, ...]) -> tuple[Any, ...]:
    if not bundle:
        raise ValueError("a bundle must hold at least one resource")
    return bundle


def bundle_contains(resources: ResourceRegistry, kinds: Any) -> bool:
    """Tell whether every resource type of the bundle is stored in ``resources``."""
    if isinstance(kinds, tuple):
        return all(bundle_contains(resources, kind) for kind in _parts(kinds))
    return resources.contains(kinds)


def insert_bundle(resources: MutableResourceRegistry, bundle: Any) -> Any:
    """Insert every part of ``bundle`` into ``resources``.

    Return the previous bundle in the same shape. Return None as soon as a
    part had no previous value; the parts after it are then left uninserted.
    """
    if not isinstance(bundle, tuple):
        return resources.insert(bundle)
    previous = []
    for part in _parts(bundle):
        replaced = insert_bundle(resources, part)
        if replaced is None:
            return None
        previous.append(replaced)
    return tuple(previous)


def try_insert_bundle(resources: MutableResourceRegistry, bundle: Any) -> Any:
    """Insert ``bundle`` using the registry's fallible insertion.

    Behaves like ``insert_bundle``; any error the registry raises propagates.
    """
    if not isinstance(bundle, tuple):
        return resources.try_insert(bundle)
    previous = []
    for part in _parts(bundle):
        replaced = try_insert_bundle(resources, part)
        if replaced is None:
            return None
        previous.append(replaced)
    return tuple(previous)


def remove_bundle(resources: MutableResourceRegistry, kinds: Any) -> Any:
    """Remove the resources of the bundle and return them in the same shape.

    Return None as soon as a part is missing; the parts after it are then
    left in place.
    """
    if not isinstance(kinds, tuple):
        return resources.remove(kinds)
    removed = []
    for kind in _parts(kinds):
        value = remove_bundle(resources, kind)
        if value is None:
            return None
        removed.append(value)
    return tuple(removed)


def get_bundle(resources: ResourceRegistry, kinds: Any) -> Any:
    """Return the stored resources of the bundle, or None if any is missing."""
    if not isinstance(kinds, tuple):
        return resources.get(kinds)
    found = []
    for kind in _parts(kinds):
        value = get_bundle(resources, kind)
        if value is None:
            return None
        found.append(value)
    return tuple(found)


def provide_bundle(resources: ResourceRegistry, kinds: Any) -> Any:
    """Return the stored resources of the bundle; raise KeyError if any is missing."""
    if not isinstance(kinds, tuple):
        return resources.provide(kinds)
    return tuple(provide_bundle(resources, kind) for kind in _parts(kinds))


def with_bundle(resources: ResourceRegistry, bundle: Any) -> ResourceRegistry:
    """Return a new registry holding every part of ``bundle`` as well."""
    if not isinstance(bundle, tuple):
        return resources.with_(bundle)
    for part in _parts(bundle):
        resources = with_bundle(resources, part)
    return resources