"""Use case for reading and maintaining flashcard sets."""

import structlog
from structlog.stdlib import BoundLogger

from studydeck.application.common.clock import Clock, utc_now
from studydeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from studydeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from studydeck.application.learning.services.card_content import CardContentResolver
from studydeck.application.learning.use_cases.dtos import (
    CardInput,
    FlashcardSetDetails,
    FlashcardSetSummary,
    SyncedCard,
)
from studydeck.domain.common.value_objects import FlashcardId, FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard import Flashcard
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet
from studydeck.domain.learning.exceptions import FlashcardNotFoundError, FlashcardSetNotFoundError


class FlashcardSetUseCase:
    """Listing, inspecting, deleting and extending flashcard sets."""

    def __init__(
        self,
        set_repository: FlashcardSetRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        content_resolver: CardContentResolver,
        clock: Clock = utc_now,
        logger: BoundLogger | None = None,
    ) -> None:
        self.set_repository = set_repository
        self.flashcard_repository = flashcard_repository
        self.content_resolver = content_resolver
        self.clock = clock
        self.logger = logger or structlog.get_logger(__name__)

    def _get_owned_set(self, user_id: int, set_id: int) -> FlashcardSet:
        flashcard_set = self.set_repository.find_by_id(FlashcardSetId(set_id))
        if not flashcard_set:
            raise FlashcardSetNotFoundError(set_id)
        flashcard_set.ensure_owned_by(UserId(user_id))
        return flashcard_set

    def list_sets(self, user_id: int) -> list[FlashcardSetSummary]:
        """All sets of the user, newest first, with their card counts."""
        return [
            FlashcardSetSummary(flashcard_set=flashcard_set, card_count=count)
            for flashcard_set, count in self.set_repository.find_by_user_with_counts(
                UserId(user_id)
            )
        ]

    def get_set_details(self, user_id: int, set_id: int) -> FlashcardSetDetails:
        """
        Get a set with all of its cards.

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            AuthorizationError: If the user does not own the set
        """
        flashcard_set = self._get_owned_set(user_id, set_id)
        return FlashcardSetDetails(
            flashcard_set=flashcard_set,
            flashcards=self.flashcard_repository.find_by_set(flashcard_set.id),
        )

    def delete_set(self, user_id: int, set_id: int) -> int:
        """
        Delete a set and its cards.

        Returns:
            Number of cards deleted with the set

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            AuthorizationError: If the user does not own the set
        """
        flashcard_set = self._get_owned_set(user_id, set_id)

        deleted_cards = self.flashcard_repository.delete_by_set(flashcard_set.id)
        self.set_repository.delete(flashcard_set.id)

        self.logger.info(
            "flashcard_set_deleted",
            user_id=user_id,
            set_id=set_id,
            deleted_cards=deleted_cards,
        )
        return deleted_cards

    async def add_card(
        self,
        user_id: int,
        set_id: int,
        card: CardInput,
        content_type: str | None = None,
    ) -> SyncedCard:
        """
        Append one card to a set, generating its back like a set sync does.

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            AuthorizationError: If the user does not own the set
            StorageError: If the card cannot be saved
        """
        log = self.logger.bind(operation="add_card", user_id=user_id, set_id=set_id)
        flashcard_set = self._get_owned_set(user_id, set_id)

        content = await self.content_resolver.resolve(card.definition, content_type, log)
        flashcard = Flashcard.create_for_set(
            flashcard_set,
            front=card.term,
            back=content.text,
            content_type=content_type,
            now=self.clock(),
        )
        flashcard = self.flashcard_repository.save(flashcard)

        log.info("flashcard_added", flashcard_id=flashcard.id.value)
        return SyncedCard(flashcard=flashcard, content=content)

    def delete_card(self, user_id: int, set_id: int, flashcard_id: int) -> None:
        """
        Delete a card from a set.

        Raises:
            FlashcardNotFoundError: If the card does not exist or is in another set
            AuthorizationError: If the user does not own the card
        """
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id))
        if not flashcard or flashcard.set_id != FlashcardSetId(set_id):
            raise FlashcardNotFoundError(flashcard_id)
        flashcard.ensure_owned_by(UserId(user_id))

        self.flashcard_repository.delete(flashcard.id)

        self.logger.info(
            "flashcard_deleted", user_id=user_id, set_id=set_id, flashcard_id=flashcard_id
        )
