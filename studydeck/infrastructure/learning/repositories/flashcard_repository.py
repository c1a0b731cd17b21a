"""Repository for Flashcard domain entities."""

from datetime import datetime

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studydeck.domain.common.value_objects import FlashcardId, FlashcardSetId, UserId
from studydeck.domain.learning.entities.flashcard import CardStatus, Flashcard
from studydeck.exceptions import StorageError
from studydeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from studydeck.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        orm_model = self.db.get(FlashcardORM, flashcard_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_set(self, set_id: FlashcardSetId) -> list[Flashcard]:
        """
        Get all flashcards in a set.

        Returns:
            List of flashcard entities in insertion order
        """
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.set_id == set_id.value)
            .order_by(FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_due(self, user_id: UserId, now: datetime) -> list[Flashcard]:
        """
        Get the user's cards whose review time has come.

        Returns:
            List of flashcard entities ordered by next_review_at ASC
        """
        stmt = (
            select(FlashcardORM)
            .where(
                FlashcardORM.user_id == user_id.value,
                FlashcardORM.next_review_at <= now,
            )
            .order_by(FlashcardORM.next_review_at.asc(), FlashcardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_status(self, user_id: UserId) -> dict[CardStatus, int]:
        """
        Count a user's flashcards per status.

        Returns:
            Mapping with an entry for every status, zero when absent
        """
        stmt = (
            select(FlashcardORM.status, func.count(FlashcardORM.id))
            .where(FlashcardORM.user_id == user_id.value)
            .group_by(FlashcardORM.status)
        )
        counts = dict.fromkeys(CardStatus, 0)
        for status, count in self.db.execute(stmt).all():
            counts[CardStatus(status)] = count
        return counts

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Each call commits on its own, so cards saved earlier stay persisted
        when a later save fails.

        Args:
            flashcard: The flashcard entity to save

        Returns:
            Saved flashcard entity with database-generated values

        Raises:
            StorageError: If the write fails
        """
        try:
            if not flashcard.id.is_persisted:
                orm_model = self.mapper.to_orm(flashcard)
                self.db.add(orm_model)
            else:
                orm_model = self.db.get(FlashcardORM, flashcard.id.value)
                if not orm_model:
                    raise ValueError(f"Flashcard {flashcard.id.value} not found")
                self.mapper.to_orm(flashcard, orm_model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("save_flashcard") from e

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(FlashcardORM, flashcard_id.value)
        if not orm_model:
            return False
        try:
            self.db.delete(orm_model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("delete_flashcard") from e
        return True

    def delete_by_set(self, set_id: FlashcardSetId) -> int:
        """Delete every card in a set. Returns the number of deleted cards."""
        return self._delete_where(FlashcardORM.set_id == set_id.value, "delete_set_flashcards")

    def delete_by_user(self, user_id: UserId) -> int:
        """Delete every card owned by a user. Returns the number of deleted cards."""
        return self._delete_where(FlashcardORM.user_id == user_id.value, "delete_user_flashcards")

    def _delete_where(self, condition: ColumnElement[bool], operation: str) -> int:
        try:
            result = self.db.execute(delete(FlashcardORM).where(condition))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(operation) from e
        # Bulk delete bypasses the identity map
        self.db.expire_all()
        return result.rowcount or 0
