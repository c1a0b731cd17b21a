"""
Flashcard entity for spaced repetition learning.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum

from studydeck.domain.common.entity import Entity
from studydeck.domain.common.exceptions import AuthorizationError, DomainError, ValidationError
from studydeck.domain.common.value_objects import FlashcardId, FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet

# Content type used when the definition is stored verbatim
RAW_CONTENT_TYPE = "raw"

# Days until a mastered card is due again
DEFAULT_MASTERED_REVIEW_DELAY_DAYS = 3


class CardStatus(StrEnum):
    LEARNING = "learning"
    MASTERED = "mastered"

    @classmethod
    def parse(cls, value: str) -> "CardStatus":
        """
        Raises:
            ValidationError: If ``value`` is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Invalid status '{value}'", field="status", value=value
            ) from None


def normalize_content_type(content_type: str | None) -> str:
    """Unset content types mean raw mode."""
    return content_type or RAW_CONTENT_TYPE


def is_raw(content_type: str | None) -> bool:
    return normalize_content_type(content_type) == RAW_CONTENT_TYPE


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard belonging to a flashcard set.

    Business Rules:
    - Front and back cannot be empty
    - A flashcard always belongs to a set
    - The card owner is always the set owner
    """

    id: FlashcardId
    user_id: UserId
    set_id: FlashcardSetId
    front: str
    back: str
    content_type: str = RAW_CONTENT_TYPE
    status: CardStatus = CardStatus.LEARNING
    next_review_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.front or not self.front.strip():
            raise DomainError("Front cannot be empty")
        if not self.back or not self.back.strip():
            raise DomainError("Back cannot be empty")

    def ensure_owned_by(self, user_id: UserId) -> None:
        """
        Raises:
            AuthorizationError: If ``user_id`` does not own this card
        """
        if self.user_id != user_id:
            raise AuthorizationError("User not authorized to access this flashcard")

    def mark(
        self,
        status: CardStatus,
        now: datetime,
        mastered_delay_days: int = DEFAULT_MASTERED_REVIEW_DELAY_DAYS,
    ) -> None:
        """
        Set the review status and reschedule the card.

        Mastered cards come back after ``mastered_delay_days``; learning cards
        are due immediately.
        """
        self.status = status
        if status is CardStatus.MASTERED:
            self.next_review_at = now + timedelta(days=mastered_delay_days)
        else:
            self.next_review_at = now

    @classmethod
    def create_for_set(
        cls,
        flashcard_set: FlashcardSet,
        front: str,
        back: str,
        content_type: str | None,
        now: datetime,
    ) -> "Flashcard":
        """
        Create a new card in ``flashcard_set`` (ID will be 0 until persisted).

        Front and back are stored exactly as given.
        """
        return cls(
            id=FlashcardId.generate(),
            user_id=flashcard_set.user_id,
            set_id=flashcard_set.id,
            front=front,
            back=back,
            content_type=normalize_content_type(content_type),
            status=CardStatus.LEARNING,
            next_review_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        user_id: UserId,
        set_id: FlashcardSetId,
        front: str,
        back: str,
        content_type: str,
        status: CardStatus,
        next_review_at: datetime,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            set_id=set_id,
            front=front,
            back=back,
            content_type=content_type,
            status=status,
            next_review_at=next_review_at,
            created_at=created_at,
            updated_at=updated_at,
        )
