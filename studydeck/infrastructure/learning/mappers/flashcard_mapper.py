"""Mapper for Flashcard ORM ↔ Domain conversion."""

from studydeck.domain.common.value_objects import FlashcardId, FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard import CardStatus, Flashcard
from studydeck.models import Flashcard as FlashcardORM
from studydeck.utils import as_utc


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            set_id=FlashcardSetId(orm_model.set_id),
            front=orm_model.front,
            back=orm_model.back,
            content_type=orm_model.content_type,
            status=CardStatus(orm_model.status),
            next_review_at=as_utc(orm_model.next_review_at),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.front = domain_entity.front
            orm_model.back = domain_entity.back
            orm_model.content_type = domain_entity.content_type
            orm_model.status = domain_entity.status.value
            if domain_entity.next_review_at is not None:
                orm_model.next_review_at = domain_entity.next_review_at
            return orm_model

        orm_model = FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            user_id=domain_entity.user_id.value,
            set_id=domain_entity.set_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            content_type=domain_entity.content_type,
            status=domain_entity.status.value,
        )
        # Leave unset to fall back to the column's server default
        if domain_entity.next_review_at is not None:
            orm_model.next_review_at = domain_entity.next_review_at
        return orm_model
