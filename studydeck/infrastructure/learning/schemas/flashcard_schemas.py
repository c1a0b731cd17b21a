"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from studydeck.domain.learning.entities.flashcard import Flashcard as FlashcardEntity


class Flashcard(BaseModel):
    """Schema for Flashcard response."""

    id: int
    user_id: int
    set_id: int
    front: str
    back: str
    content_type: str
    status: str
    next_review_at: datetime | None

    @classmethod
    def from_entity(cls, entity: FlashcardEntity) -> "Flashcard":
        return cls(
            id=entity.id.value,
            user_id=entity.user_id.value,
            set_id=entity.set_id.value,
            front=entity.front,
            back=entity.back,
            content_type=entity.content_type,
            status=entity.status.value,
            next_review_at=entity.next_review_at,
        )


class FlashcardStatusUpdateRequest(BaseModel):
    """Schema for updating a flashcard's review status."""

    status: str = Field(..., description="Either 'learning' or 'mastered'")


class FlashcardStatusUpdateResponse(BaseModel):
    """Schema for flashcard status update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Updated flashcard")


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(..., description="List of flashcards")


class StudyStatsResponse(BaseModel):
    """Schema for study statistics."""

    total_sets: int
    cards_mastered: int
    streak: int
