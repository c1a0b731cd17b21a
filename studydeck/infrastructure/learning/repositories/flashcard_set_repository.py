"""Repository for FlashcardSet domain entities."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studydeck.domain.common.value_objects import FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard_set import FlashcardSet
from studydeck.exceptions import StorageError
from studydeck.infrastructure.learning.mappers.flashcard_set_mapper import FlashcardSetMapper
from studydeck.models import Flashcard as FlashcardORM
from studydeck.models import FlashcardSet as FlashcardSetORM


class FlashcardSetRepository:
    """Repository for FlashcardSet domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardSetMapper()

    def find_by_id(self, set_id: FlashcardSetId) -> FlashcardSet | None:
        """
        Find a flashcard set by ID.

        Ownership is not filtered here so callers can tell a missing set
        apart from someone else's set.
        """
        orm_model = self.db.get(FlashcardSetORM, set_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_with_counts(self, user_id: UserId) -> list[tuple[FlashcardSet, int]]:
        """
        Get all sets owned by a user together with their card counts.

        Returns:
            List of (set, card_count) tuples ordered by created_at DESC
        """
        card_count = func.count(FlashcardORM.id).label("card_count")
        stmt = (
            select(FlashcardSetORM, card_count)
            .outerjoin(FlashcardORM, FlashcardORM.set_id == FlashcardSetORM.id)
            .where(FlashcardSetORM.user_id == user_id.value)
            .group_by(FlashcardSetORM.id)
            .order_by(FlashcardSetORM.created_at.desc(), FlashcardSetORM.id.desc())
        )
        rows = self.db.execute(stmt).all()
        return [(self.mapper.to_domain(orm), count) for orm, count in rows]

    def count_by_user(self, user_id: UserId) -> int:
        """Count the sets owned by a user."""
        stmt = select(func.count(FlashcardSetORM.id)).where(
            FlashcardSetORM.user_id == user_id.value
        )
        return self.db.execute(stmt).scalar() or 0

    def save(self, flashcard_set: FlashcardSet) -> FlashcardSet:
        """
        Save a flashcard set entity (create or update).

        Args:
            flashcard_set: The set entity to save

        Returns:
            Saved set entity with database-generated values

        Raises:
            StorageError: If the write fails
        """
        try:
            if not flashcard_set.id.is_persisted:
                orm_model = self.mapper.to_orm(flashcard_set)
                self.db.add(orm_model)
            else:
                orm_model = self.db.get(FlashcardSetORM, flashcard_set.id.value)
                if not orm_model:
                    raise ValueError(f"Flashcard set {flashcard_set.id.value} not found")
                self.mapper.to_orm(flashcard_set, orm_model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("save_flashcard_set") from e

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, set_id: FlashcardSetId) -> bool:
        """
        Delete a flashcard set.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(FlashcardSetORM, set_id.value)
        if not orm_model:
            return False
        try:
            self.db.delete(orm_model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("delete_flashcard_set") from e
        return True

    def delete_by_user(self, user_id: UserId) -> int:
        """Delete every set owned by a user. Returns the number of deleted sets."""
        try:
            result = self.db.execute(
                delete(FlashcardSetORM).where(FlashcardSetORM.user_id == user_id.value)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("delete_flashcard_sets") from e
        self.db.expire_all()
        return result.rowcount or 0
