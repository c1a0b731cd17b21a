"""
Use case for creating and updating a flashcard set together with its cards.

Protocol shared by both operations:

1. The set is written and committed before any card is touched.
2. On update, every existing card of the set is deleted (replace-all).
3. Cards are materialized strictly in input order, one at a time. Each card
   waits for its content and its own commit before the next one starts.

Nothing spans the whole operation in one transaction. When saving card ``i``
fails, the set and cards ``0..i-1`` stay persisted and the error reaches the
caller. Two updates of the same set running at once are not serialized;
the last one to write wins.
"""

from collections.abc import Sequence
from functools import partial

import structlog
from structlog.stdlib import BoundLogger

from studydeck.application.common.clock import Clock, utc_now
from studydeck.application.common.fold import fold_in_order
from studydeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from studydeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from studydeck.application.learning.services.card_content import CardContentResolver
from studydeck.application.learning.use_cases.dtos import CardInput, SyncedCard, SyncedSet
from studydeck.domain.common.value_objects import FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard import Flashcard, normalize_content_type
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet
from studydeck.domain.learning.exceptions import FlashcardSetNotFoundError


class FlashcardSetSyncUseCase:
    """Creates and updates sets, populating their cards serially."""

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

    async def create_set(
        self,
        user_id: int,
        title: str,
        description: str | None,
        cards: Sequence[CardInput],
        content_type: str | None = None,
    ) -> SyncedSet:
        """
        Create a set owned by ``user_id`` and one card per input.

        An empty ``cards`` sequence yields a persisted set without cards.

        Raises:
            ValidationError: If the title is invalid (nothing is written)
            StorageError: If a write fails
        """
        log = self.logger.bind(operation="create_set", user_id=user_id)

        flashcard_set = FlashcardSet.create(UserId(user_id), title, description)
        flashcard_set = self.set_repository.save(flashcard_set)
        log = log.bind(set_id=flashcard_set.id.value)
        log.info("flashcard_set_created", title=flashcard_set.title)

        return await self._populate(flashcard_set, cards, content_type, log)

    async def update_set(
        self,
        user_id: int,
        set_id: int,
        title: str | None,
        description: str | None,
        cards: Sequence[CardInput],
        content_type: str | None = None,
    ) -> SyncedSet:
        """
        Overwrite a set's provided metadata and replace all of its cards.

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            AuthorizationError: If ``user_id`` does not own the set (nothing is written)
            ValidationError: If the new title is invalid (nothing is written)
            StorageError: If a write fails
        """
        log = self.logger.bind(operation="update_set", user_id=user_id, set_id=set_id)

        flashcard_set = self.set_repository.find_by_id(FlashcardSetId(set_id))
        if not flashcard_set:
            raise FlashcardSetNotFoundError(set_id)
        flashcard_set.ensure_owned_by(UserId(user_id))

        flashcard_set.update_details(title=title, description=description)
        flashcard_set = self.set_repository.save(flashcard_set)

        removed = self.flashcard_repository.delete_by_set(flashcard_set.id)
        log.info("flashcard_set_updated", removed_cards=removed)

        return await self._populate(flashcard_set, cards, content_type, log)

    async def _populate(
        self,
        flashcard_set: FlashcardSet,
        cards: Sequence[CardInput],
        content_type: str | None,
        log: BoundLogger,
    ) -> SyncedSet:
        step = partial(self._append_card, flashcard_set, content_type, log)
        synced: tuple[SyncedCard, ...] = await fold_in_order(step, cards, ())

        result = SyncedSet(flashcard_set=flashcard_set, cards=synced)
        log.info(
            "flashcard_set_synced",
            card_count=len(result.cards),
            fallback_count=result.fallback_count,
            content_type=normalize_content_type(content_type),
        )
        return result

    async def _append_card(
        self,
        flashcard_set: FlashcardSet,
        content_type: str | None,
        log: BoundLogger,
        synced: tuple[SyncedCard, ...],
        card: CardInput,
    ) -> tuple[SyncedCard, ...]:
        content = await self.content_resolver.resolve(
            card.definition, content_type, log.bind(position=len(synced))
        )
        flashcard = Flashcard.create_for_set(
            flashcard_set,
            front=card.term,
            back=content.text,
            content_type=content_type,
            now=self.clock(),
        )
        flashcard = self.flashcard_repository.save(flashcard)
        return (*synced, SyncedCard(flashcard=flashcard, content=content))
