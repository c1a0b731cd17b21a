"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from studydeck.domain.common.value_objects.ids import UserId
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.exceptions import EmailAlreadyExistsError
from studydeck.exceptions import StorageError
from studydeck.infrastructure.identity.mappers.user_mapper import UserMapper
from studydeck.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Args:
            email: The user's email address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity (create or update).

        Args:
            user: The user entity to save

        Returns:
            Saved user entity with database-generated values

        Raises:
            EmailAlreadyExistsError: If the email belongs to another account
            StorageError: If the write fails for any other reason
        """
        try:
            if not user.id.is_persisted:
                orm_model = self.mapper.to_orm(user)
                self.db.add(orm_model)
            else:
                orm_model = self.db.get(UserORM, user.id.value)
                if not orm_model:
                    raise ValueError(f"User with id {user.id.value} not found")
                self.mapper.to_orm(user, orm_model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(user.email) from e
            raise StorageError("save_user") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("save_user") from e

        self.db.refresh(orm_model)
        logger.info(f"Saved user {orm_model.id}")
        return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(UserORM, user_id.value)
        if not orm_model:
            return False
        try:
            self.db.delete(orm_model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("delete_user") from e
        return True
