"""DTOs for learning use cases."""

from studydeck.application.learning.use_cases.dtos.flashcard_set_dtos import (
    CardInput,
    FlashcardSetDetails,
    FlashcardSetSummary,
    StudyStats,
    SyncedCard,
    SyncedSet,
)

__all__ = [
    "CardInput",
    "FlashcardSetDetails",
    "FlashcardSetSummary",
    "StudyStats",
    "SyncedCard",
    "SyncedSet",
]
