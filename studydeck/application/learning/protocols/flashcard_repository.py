"""Protocol for Flashcard repository in learning context."""

from datetime import datetime
from typing import Protocol

from studydeck.domain.common.value_objects.ids import FlashcardId, FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard import CardStatus, Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None: ...

    def find_by_set(self, set_id: FlashcardSetId) -> list[Flashcard]:
        """
        Get all flashcards in a set.

        Returns:
            List of flashcard entities in the order they were saved
        """
        ...

    def find_due(self, user_id: UserId, now: datetime) -> list[Flashcard]:
        """
        Get the user's flashcards due for review at ``now``.

        Returns:
            List of flashcard entities, earliest review first
        """
        ...

    def count_by_status(self, user_id: UserId) -> dict[CardStatus, int]: ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard, committing immediately.

        Raises:
            StorageError: If the write fails
        """
        ...

    def delete(self, flashcard_id: FlashcardId) -> bool: ...

    def delete_by_set(self, set_id: FlashcardSetId) -> int: ...

    def delete_by_user(self, user_id: UserId) -> int: ...
