"""DTOs for flashcard set use cases."""

from dataclasses import dataclass

from studydeck.application.learning.services.card_content import CardContent, Fallback
from studydeck.domain.common.exceptions import ValidationError
from studydeck.domain.learning.entities.flashcard import Flashcard
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet


@dataclass(frozen=True)
class CardInput:
    """A term/definition pair submitted for a set."""

    term: str
    definition: str

    def __post_init__(self) -> None:
        if not self.term or not self.term.strip():
            raise ValidationError("Term cannot be empty", field="term")
        if not self.definition or not self.definition.strip():
            raise ValidationError("Definition cannot be empty", field="definition")


@dataclass(frozen=True)
class SyncedCard:
    """A persisted card and how its back text was obtained."""

    flashcard: Flashcard
    content: CardContent


@dataclass(frozen=True)
class SyncedSet:
    """Result of creating or updating a set: the set and its cards in input order."""

    flashcard_set: FlashcardSet
    cards: tuple[SyncedCard, ...]

    @property
    def flashcards(self) -> list[Flashcard]:
        return [card.flashcard for card in self.cards]

    @property
    def fallback_count(self) -> int:
        return sum(isinstance(card.content, Fallback) for card in self.cards)


@dataclass
class FlashcardSetSummary:
    flashcard_set: FlashcardSet
    card_count: int


@dataclass
class FlashcardSetDetails:
    flashcard_set: FlashcardSet
    flashcards: list[Flashcard]


@dataclass
class StudyStats:
    total_sets: int
    cards_mastered: int
    streak: int
