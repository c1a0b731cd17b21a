"""Mapper for User ORM ↔ Domain conversion."""

from studydeck.domain.common.value_objects.ids import UserId
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.value_objects.activity_streak import ActivityStreak
from studydeck.models import User as UserORM
from studydeck.utils import as_utc


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            name=orm_model.name or "",
            hashed_password=orm_model.hashed_password,
            activity=ActivityStreak(
                count=orm_model.streak,
                last_active_at=as_utc(orm_model.last_active_at),
                active_days=tuple(orm_model.active_days or ()),
            ),
            reminder_enabled=orm_model.reminder_enabled,
            reminder_time=orm_model.reminder_time,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        activity = domain_entity.activity
        if orm_model:
            orm_model.email = domain_entity.email
            orm_model.name = domain_entity.name
            orm_model.hashed_password = domain_entity.hashed_password
            orm_model.streak = activity.count
            orm_model.last_active_at = activity.last_active_at
            # New list so the JSON column is flagged as changed
            orm_model.active_days = list(activity.active_days)
            orm_model.reminder_enabled = domain_entity.reminder_enabled
            orm_model.reminder_time = domain_entity.reminder_time
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            email=domain_entity.email,
            name=domain_entity.name,
            hashed_password=domain_entity.hashed_password,
            streak=activity.count,
            last_active_at=activity.last_active_at,
            active_days=list(activity.active_days),
            reminder_enabled=domain_entity.reminder_enabled,
            reminder_time=domain_entity.reminder_time,
        )
