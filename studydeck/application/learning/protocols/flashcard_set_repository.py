"""Protocol for FlashcardSet repository in learning context."""

from typing import Protocol

from studydeck.domain.common.value_objects.ids import FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet


class FlashcardSetRepositoryProtocol(Protocol):
    """Protocol for FlashcardSet repository operations."""

    def find_by_id(self, set_id: FlashcardSetId) -> FlashcardSet | None: ...

    def find_by_user_with_counts(self, user_id: UserId) -> list[tuple[FlashcardSet, int]]:
        """
        Get all sets owned by a user together with their card counts.

        Returns:
            List of (set, card_count) tuples, newest set first
        """
        ...

    def count_by_user(self, user_id: UserId) -> int: ...

    def save(self, flashcard_set: FlashcardSet) -> FlashcardSet:
        """
        Save a set, committing immediately.

        Raises:
            StorageError: If the write fails
        """
        ...

    def delete(self, set_id: FlashcardSetId) -> bool: ...

    def delete_by_user(self, user_id: UserId) -> int: ...
