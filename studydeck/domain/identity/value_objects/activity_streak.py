"""Activity streak value object."""

from dataclasses import dataclass, field
from datetime import datetime

from studydeck.domain.common.exceptions import ValidationError
from studydeck.domain.common.value_object import ValueObject

# Default number of calendar days kept in the activity log
DEFAULT_ACTIVE_DAYS_LIMIT = 90


@dataclass(frozen=True)
class ActivityStreak(ValueObject):
    """
    A user's daily activity streak.

    Attributes:
        count: Consecutive active days, never negative
        last_active_at: Instant the streak last advanced, None if never active
        active_days: Chronological ``YYYY-MM-DD`` strings without duplicates
    """

    count: int
    last_active_at: datetime | None = None
    active_days: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValidationError("Streak cannot be negative", field="streak", value=self.count)
        if len(set(self.active_days)) != len(self.active_days):
            raise ValidationError("Active days cannot contain duplicates", field="active_days")

    @classmethod
    def started_at(cls, now: datetime) -> "ActivityStreak":
        """Streak of a freshly registered user."""
        return cls(count=1, last_active_at=now, active_days=())

    def recent_days(self, limit: int) -> list[str]:
        """Return the most recent ``limit`` active days, oldest first."""
        return list(self.active_days[-limit:])
