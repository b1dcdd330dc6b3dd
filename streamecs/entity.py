"""Entity keys: a unique index paired with a generation counter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, TypeVar

_E = TypeVar("_E", bound="Entity")

_U32_MAX = 2**32 - 1


class Entity(ABC):
    """Unique key of an entity.

    An entity is identified by its ``index`` and ``generation``. The index can
    be reused once an entity is destroyed; the generation tells how many times
    that index has been reused, which keeps stale keys from matching new
    entities.
    """

    index: int
    generation: int

    @classmethod
    @abstractmethod
    def with_(cls: type[_E], index: int, generation: int) -> _E:
        """Create an entity key with the given index and generation."""

    @classmethod
    @abstractmethod
    def null(cls: type[_E]) -> _E:
        """Create the key that belongs to no entity."""

    @abstractmethod
    def is_null(self) -> bool:
        """Tell whether this key is the null key."""


def _check_bound(name: str, value: object, upper: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must lie in 0..={upper}, got {value}")


@dataclass(frozen=True, order=True)
class DefaultEntity(Entity):
    """Default entity key made of two unsigned integers.

    Both parts are 32-bit unsigned by default; subclasses may narrow or widen
    them by overriding ``INDEX_MAX`` and ``GENERATION_MAX``.
    """

    INDEX_MAX: ClassVar[int] = _U32_MAX
    GENERATION_MAX: ClassVar[int] = _U32_MAX

    index: int = 0
    generation: int = 0

    def __post_init__(self) -> None:
        _check_bound("index", self.index, self.INDEX_MAX)
        _check_bound("generation", self.generation, self.GENERATION_MAX)

    @classmethod
    def with_(cls, index: int, generation: int) -> DefaultEntity:
        """Create an entity key with the given index and generation."""
        return cls(index, generation)

    @classmethod
    def null(cls) -> DefaultEntity:
        """Create the key that belongs to no entity: the largest index, generation zero."""
        return cls(cls.INDEX_MAX, 0)

    def is_null(self) -> bool:
        """Tell whether the index is the reserved null index."""
        return self.index == self.INDEX_MAX

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"