"""Build a dependency out of an unknown number of inputs.

A container is fed inputs one at a time. It keeps the ones it wants and
refuses the rest. Flushing it then produces the finished dependency, or
raises if the dependency cannot be made from what was kept.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from streamecs.lookup import type_name


class InputTypeMismatchError(LookupError):
    """Raised when no input of the required type was provided."""

    def __init__(self, kind: type) -> None:
        self.kind = kind
        self.type_name = type_name(kind)
        super().__init__(f'no input of type "{self.type_name}" were provided')


class Container(ABC):
    """Collects inputs and flushes them into a dependency."""

    @abstractmethod
    def insert(self, item: Any) -> bool:
        """Offer an input to the container.

        Return True if the container consumed it, and False if the input
        is handed back so that other containers may take it.
        """

    @abstractmethod
    def flush(self) -> Any:
        """Build the dependency from the inputs kept so far."""


class TypeContainer(Container):
    """Keeps the first input whose type is exactly ``kind``.

    With ``shared`` set, the kept input is still handed back after being
    taken, so containers further along may take the same object too.
    """

    def __init__(self, kind: type, *, shared: bool = False) -> None:
        self.kind = kind
        self.shared = shared
        self._value: Any = None
        self._filled = False

    def insert(self, item: Any) -> bool:
        if self._filled or type(item) is not self.kind:
            return False
        self._value = item
        self._filled = True
        return not self.shared

    def flush(self) -> Any:
        if not self._filled:
            raise InputTypeMismatchError(self.kind)
        return self._value


class OptionalContainer(Container):
    """Wraps another container, forwarding every input and its flush."""

    def __init__(self, inner: Container) -> None:
        self.inner = inner

    def insert(self, item: Any) -> bool:
        return self.inner.insert(item)

    def flush(self) -> Any:
        return self.inner.flush()


class SequenceContainer(Container):
    """A fixed sequence of containers flushed into a tuple.

    Each input is offered to the containers in order until one consumes it.
    Flushing raises the error of the first container that fails.
    """

    def __init__(self, *containers: Container) -> None:
        self.containers = containers

    def insert(self, item: Any) -> bool:
        return any(container.insert(item) for container in self.containers)

    def flush(self) -> tuple[Any, ...]:
        return tuple(container.flush() for container in self.containers)


class UnitContainer(Container):
    """Refuses every input and always flushes into an empty tuple."""

    def insert(self, item: Any) -> bool:
        return False

    def flush(self) -> tuple[()]:
        return ()


def dependency_from_iter(container: Container, iterable: Iterable[Any]) -> Any:
    """Offer every input to ``container``, then flush it into a dependency."""
    for item in iterable:
        container.insert(item)
    return container.flush()