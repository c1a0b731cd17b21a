"""Learning context schemas."""

from studydeck.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardsListResponse,
    FlashcardStatusUpdateRequest,
    FlashcardStatusUpdateResponse,
    StudyStatsResponse,
)
from studydeck.infrastructure.learning.schemas.flashcard_set_schemas import (
    AddCardRequest,
    AddCardResponse,
    CardInputSchema,
    FlashcardSet,
    FlashcardSetCreateRequest,
    FlashcardSetDeleteResponse,
    FlashcardSetsListResponse,
    FlashcardSetUpdateRequest,
    FlashcardSetWithCardsResponse,
    FlashcardSetWithCount,
)

__all__ = [
    "AddCardRequest",
    "AddCardResponse",
    "CardInputSchema",
    "Flashcard",
    "FlashcardSet",
    "FlashcardSetCreateRequest",
    "FlashcardSetDeleteResponse",
    "FlashcardSetUpdateRequest",
    "FlashcardSetWithCardsResponse",
    "FlashcardSetWithCount",
    "FlashcardSetsListResponse",
    "FlashcardStatusUpdateRequest",
    "FlashcardStatusUpdateResponse",
    "FlashcardsListResponse",
    "StudyStatsResponse",
]
