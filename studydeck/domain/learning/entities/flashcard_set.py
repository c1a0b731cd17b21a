"""
Flashcard set entity: a named collection of flashcards owned by one user.
"""

from dataclasses import dataclass
from datetime import datetime

from studydeck.domain.common.entity import Entity
from studydeck.domain.common.exceptions import AuthorizationError, ValidationError
from studydeck.domain.common.value_objects import FlashcardSetId, UserId

MAX_TITLE_LENGTH = 200


@dataclass
class FlashcardSet(Entity[FlashcardSetId]):
    """
    Flashcard set owned by a single user.

    Business Rules:
    - Title cannot be empty
    - Owner never changes after creation
    - Only the owner may read, change or delete the set
    """

    id: FlashcardSetId
    user_id: UserId
    title: str
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._validate_title(self.title)

    @staticmethod
    def _validate_title(title: str) -> None:
        if not title or not title.strip():
            raise ValidationError("Title cannot be empty", field="title")
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def ensure_owned_by(self, user_id: UserId) -> None:
        """
        Raises:
            AuthorizationError: If ``user_id`` does not own this set
        """
        if not self.is_owned_by(user_id):
            raise AuthorizationError("User not authorized to access this flashcard set")

    def update_details(self, title: str | None = None, description: str | None = None) -> None:
        """
        Overwrite metadata fields that were provided.

        An empty title counts as not provided. An empty description clears it.
        """
        if title:
            self._validate_title(title)
            self.title = title.strip()
        if description is not None:
            self.description = description

    @classmethod
    def create(cls, user_id: UserId, title: str, description: str | None = None) -> "FlashcardSet":
        """Create a new set (ID will be 0 until persisted)."""
        cls._validate_title(title)
        return cls(
            id=FlashcardSetId.generate(),
            user_id=user_id,
            title=title.strip(),
            description=description or "",
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardSetId,
        user_id: UserId,
        title: str,
        description: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "FlashcardSet":
        """Reconstitute a set from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
