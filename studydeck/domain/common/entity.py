"""
Base classes for Entities and their identifiers.

Two entities are equal when they share an identity, whatever their other attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers wrap a database integer. The value 0 is a placeholder for an
    entity that has not been persisted yet.

    Example:
        set_id = FlashcardSetId(42)
        card_id = FlashcardId(42)
        # Different types, so they cannot be mixed up
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_persisted(self) -> bool:
        """Whether the database has assigned this identifier."""
        return self.value != 0

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id, replaced by the database on insert."""
        return cls(0)

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
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
