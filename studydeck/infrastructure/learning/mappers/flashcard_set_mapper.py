"""Mapper for FlashcardSet ORM ↔ Domain conversion."""

from studydeck.domain.common.value_objects import FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet
from studydeck.models import FlashcardSet as FlashcardSetORM


class FlashcardSetMapper:
    """Mapper for FlashcardSet ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardSetORM) -> FlashcardSet:
        """Convert ORM model to domain entity."""
        return FlashcardSet.create_with_id(
            id=FlashcardSetId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            description=orm_model.description or "",
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: FlashcardSet, orm_model: FlashcardSetORM | None = None
    ) -> FlashcardSetORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Owner is immutable, only metadata is copied back
            orm_model.title = domain_entity.title
            orm_model.description = domain_entity.description
            return orm_model

        return FlashcardSetORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            user_id=domain_entity.user_id.value,
            title=domain_entity.title,
            description=domain_entity.description,
        )
