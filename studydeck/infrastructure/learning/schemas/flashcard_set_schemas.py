"""Pydantic schemas for flashcard set API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from studydeck.application.learning.use_cases.dtos import CardInput
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet as FlashcardSetEntity
from studydeck.infrastructure.learning.schemas.flashcard_schemas import Flashcard


class CardInputSchema(BaseModel):
    """A term/definition pair."""

    term: str = Field(..., min_length=1, description="Front of the card")
    definition: str = Field(..., min_length=1, description="Source text for the back of the card")

    def to_input(self) -> CardInput:
        return CardInput(term=self.term, definition=self.definition)


class FlashcardSetCreateRequest(BaseModel):
    """Schema for creating a set with its cards."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, description="Optional description")
    cards: list[CardInputSchema] = Field(default_factory=list)
    content_type: str | None = Field(
        None,
        max_length=50,
        description="Generation style for card backs, 'raw' or omitted to keep definitions",
    )


class FlashcardSetUpdateRequest(BaseModel):
    """Schema for updating a set. The submitted cards replace all existing ones."""

    title: str | None = Field(None, max_length=200)
    description: str | None = None
    cards: list[CardInputSchema] = Field(default_factory=list)
    content_type: str | None = Field(None, max_length=50)


class AddCardRequest(CardInputSchema):
    """Schema for appending a single card to a set."""

    content_type: str | None = Field(None, max_length=50)


class FlashcardSet(BaseModel):
    """Schema for FlashcardSet response."""

    id: int
    user_id: int
    title: str
    description: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, entity: FlashcardSetEntity) -> "FlashcardSet":
        return cls(
            id=entity.id.value,
            user_id=entity.user_id.value,
            title=entity.title,
            description=entity.description,
            created_at=entity.created_at,
        )


class FlashcardSetWithCount(FlashcardSet):
    """Schema for a set in the list view."""

    card_count: int


class FlashcardSetsListResponse(BaseModel):
    """Schema for list of sets response."""

    sets: list[FlashcardSetWithCount]


class FlashcardSetWithCardsResponse(BaseModel):
    """Schema for a set together with its cards in order."""

    set: FlashcardSet
    cards: list[Flashcard]


class FlashcardSetDeleteResponse(BaseModel):
    """Schema for set deletion response."""

    success: bool
    message: str
    deleted_cards: int


class AddCardResponse(BaseModel):
    """Schema for card creation response."""

    success: bool
    message: str
    flashcard: Flashcard
