"""Use case for reviewing flashcards."""

import structlog
from structlog.stdlib import BoundLogger

from studydeck.application.common.clock import Clock, utc_now
from studydeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from studydeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from studydeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from studydeck.application.learning.use_cases.dtos import StudyStats
from studydeck.domain.common.value_objects import FlashcardId, UserId
from studydeck.domain.identity.exceptions import UserNotFoundError
from studydeck.domain.learning.entities.flashcard import (
    DEFAULT_MASTERED_REVIEW_DELAY_DAYS,
    CardStatus,
    Flashcard,
)
from studydeck.domain.learning.exceptions import FlashcardNotFoundError


class FlashcardReviewUseCase:
    """Review status, due cards and study statistics."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        set_repository: FlashcardSetRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        mastered_review_delay_days: int = DEFAULT_MASTERED_REVIEW_DELAY_DAYS,
        clock: Clock = utc_now,
        logger: BoundLogger | None = None,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.set_repository = set_repository
        self.user_repository = user_repository
        self.mastered_review_delay_days = mastered_review_delay_days
        self.clock = clock
        self.logger = logger or structlog.get_logger(__name__)

    def update_card_status(self, user_id: int, flashcard_id: int, status: str) -> Flashcard:
        """
        Mark a card as learning or mastered and reschedule it.

        Raises:
            ValidationError: If ``status`` is unknown (nothing is written)
            FlashcardNotFoundError: If the card does not exist
            AuthorizationError: If the user does not own the card
        """
        card_status = CardStatus.parse(status)

        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        flashcard.ensure_owned_by(UserId(user_id))

        flashcard.mark(card_status, self.clock(), self.mastered_review_delay_days)
        flashcard = self.flashcard_repository.save(flashcard)

        self.logger.info(
            "flashcard_status_updated",
            user_id=user_id,
            flashcard_id=flashcard_id,
            status=card_status.value,
        )
        return flashcard

    def get_due_cards(self, user_id: int) -> list[Flashcard]:
        """Cards of the user due for review now, earliest first."""
        return self.flashcard_repository.find_due(UserId(user_id), self.clock())

    def get_stats(self, user_id: int) -> StudyStats:
        """
        Summarize the user's progress.

        Reading stats does not count as activity, so the streak is reported
        as stored.
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        counts = self.flashcard_repository.count_by_status(user.id)
        return StudyStats(
            total_sets=self.set_repository.count_by_user(user.id),
            cards_mastered=counts[CardStatus.MASTERED],
            streak=user.activity.count,
        )
