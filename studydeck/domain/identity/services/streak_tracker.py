"""
Domain service for daily activity streaks.

This is a pure domain service with no infrastructure dependencies.
"""

from datetime import UTC, date, datetime, tzinfo

from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.value_objects.activity_streak import (
    DEFAULT_ACTIVE_DAYS_LIMIT,
    ActivityStreak,
)


class StreakTracker:
    """
    Advances a user's streak when they show up on a calendar day.

    Days are computed in a single reference time zone so that "today" and
    "the last active day" always mean the same thing.

    Rules:
    - Never active before: streak becomes 1
    - Same day as last activity: nothing changes
    - Exactly one day later: streak grows by one
    - More than one day apart: streak restarts at 1
    - Today is recorded in the activity log once, trimmed to the newest entries

    The day difference is an absolute value, so a clock running behind the
    stored last activity is treated like one running ahead of it.
    """

    def __init__(
        self,
        timezone: tzinfo = UTC,
        active_days_limit: int = DEFAULT_ACTIVE_DAYS_LIMIT,
    ) -> None:
        if active_days_limit < 1:
            raise ValueError("active_days_limit must be at least 1")
        self.timezone = timezone
        self.active_days_limit = active_days_limit

    def touch(self, user: User, now: datetime) -> User:
        """
        Record activity for ``user`` at ``now``.

        Args:
            user: User whose streak is advanced
            now: Current instant

        Returns:
            The same user with its streak updated
        """
        user.record_activity(self.advance(user.activity, now))
        return user

    def advance(self, activity: ActivityStreak, now: datetime) -> ActivityStreak:
        """Compute the streak that follows ``activity`` at ``now``."""
        today = self._calendar_day(now)

        if activity.last_active_at is None:
            count, last_active_at = 1, now
        else:
            diff_days = abs((today - self._calendar_day(activity.last_active_at)).days)
            if diff_days == 0:
                count, last_active_at = activity.count, activity.last_active_at
            elif diff_days == 1:
                count, last_active_at = activity.count + 1, now
            else:
                count, last_active_at = 1, now

        return ActivityStreak(
            count=count,
            last_active_at=last_active_at,
            active_days=self._log_day(activity.active_days, today),
        )

    def _calendar_day(self, instant: datetime) -> date:
        if instant.tzinfo is None:
            # Stored timestamps without zone info are UTC
            instant = instant.replace(tzinfo=UTC)
        return instant.astimezone(self.timezone).date()

    def _log_day(self, active_days: tuple[str, ...], today: date) -> tuple[str, ...]:
        day = today.isoformat()
        if day not in active_days:
            active_days = (*active_days, day)
        return active_days[-self.active_days_limit :]
