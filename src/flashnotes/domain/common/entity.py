"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(eq=False)
    class FlashcardSession(Entity[FlashcardSessionId]):
        id: FlashcardSessionId
        pattern: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a non-empty string. They provide
    type safety to prevent mixing up IDs of different entities.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(f"{self.__class__.__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType and should be
    declared with ``@dataclass(eq=False)`` so identity equality applies.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
