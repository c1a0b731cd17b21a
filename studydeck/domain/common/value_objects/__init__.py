"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, FlashcardSetId, UserId

__all__ = [
    "FlashcardId",
    "FlashcardSetId",
    "UserId",
]
