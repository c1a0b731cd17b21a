"""Unit tests for the StreakTracker domain service."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from studydeck.domain.common.exceptions import ValidationError
from studydeck.domain.common.value_objects import UserId
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.services.streak_tracker import StreakTracker
from studydeck.domain.identity.value_objects.activity_streak import ActivityStreak


def make_user(
    count: int = 0,
    last_active_at: datetime | None = None,
    active_days: tuple[str, ...] = (),
) -> User:
    return User(
        id=UserId(1),
        email="learner@example.com",
        activity=ActivityStreak(
            count=count, last_active_at=last_active_at, active_days=active_days
        ),
    )


class TestStreakTracker:
    """Tests for StreakTracker.touch."""

    def test_first_activity_starts_streak(self) -> None:
        """A user who was never active gets a streak of one."""
        now = datetime(2026, 2, 20, 9, 0, tzinfo=UTC)
        user = StreakTracker().touch(make_user(), now)

        assert user.activity.count == 1
        assert user.activity.last_active_at == now
        assert user.activity.active_days == ("2026-02-20",)

    def test_same_day_is_idempotent(self) -> None:
        """Touching twice on one day changes nothing the second time."""
        tracker = StreakTracker()
        morning = datetime(2026, 2, 20, 8, 0, tzinfo=UTC)
        evening = datetime(2026, 2, 20, 22, 30, tzinfo=UTC)

        user = tracker.touch(make_user(), morning)
        first = user.activity
        user = tracker.touch(user, evening)

        assert user.activity == first
        assert user.activity.last_active_at == morning

    def test_same_day_records_missing_active_day(self) -> None:
        """A same-day touch still logs the day if it was not logged yet."""
        last = datetime(2026, 2, 20, 8, 0, tzinfo=UTC)
        user = StreakTracker().touch(
            make_user(count=4, last_active_at=last), datetime(2026, 2, 20, 9, 0, tzinfo=UTC)
        )

        assert user.activity.count == 4
        assert user.activity.last_active_at == last
        assert user.activity.active_days == ("2026-02-20",)

    def test_next_day_extends_streak(self) -> None:
        """Activity on the following calendar day adds one."""
        last = datetime(2026, 2, 20, 23, 50, tzinfo=UTC)
        now = datetime(2026, 2, 21, 0, 10, tzinfo=UTC)
        user = StreakTracker().touch(
            make_user(count=5, last_active_at=last, active_days=("2026-02-20",)), now
        )

        assert user.activity.count == 6
        assert user.activity.last_active_at == now
        assert user.activity.active_days == ("2026-02-20", "2026-02-21")

    def test_skipped_day_resets_streak(self) -> None:
        """A gap of two calendar days restarts the streak at one."""
        user = make_user(
            count=4,
            last_active_at=datetime(2026, 2, 20, 12, 0, tzinfo=UTC),
            active_days=("2026-02-20",),
        )
        now = datetime(2026, 2, 22, 12, 0, tzinfo=UTC)

        user = StreakTracker().touch(user, now)

        assert user.activity.count == 1
        assert user.activity.last_active_at == now
        assert user.activity.active_days == ("2026-02-20", "2026-02-22")

    def test_long_absence_resets_streak(self) -> None:
        """Returning after weeks also restarts at one."""
        user = make_user(count=30, last_active_at=datetime(2026, 1, 1, tzinfo=UTC))
        user = StreakTracker().touch(user, datetime(2026, 3, 1, tzinfo=UTC))

        assert user.activity.count == 1

    def test_clock_behind_by_one_day_counts_as_consecutive(self) -> None:
        """The day difference is symmetric, so a clock one day behind still extends."""
        last = datetime(2026, 2, 21, 10, 0, tzinfo=UTC)
        now = datetime(2026, 2, 20, 10, 0, tzinfo=UTC)
        user = StreakTracker().touch(make_user(count=3, last_active_at=last), now)

        assert user.activity.count == 4
        assert user.activity.last_active_at == now

    def test_clock_far_behind_resets(self) -> None:
        """A clock several days behind resets like a gap."""
        last = datetime(2026, 2, 25, tzinfo=UTC)
        user = StreakTracker().touch(
            make_user(count=3, last_active_at=last), datetime(2026, 2, 20, tzinfo=UTC)
        )

        assert user.activity.count == 1

    def test_naive_last_active_is_treated_as_utc(self) -> None:
        """Stored timestamps without a zone compare as UTC."""
        last = datetime(2026, 2, 20, 23, 0)
        now = datetime(2026, 2, 21, 1, 0, tzinfo=UTC)
        user = StreakTracker().touch(make_user(count=2, last_active_at=last), now)

        assert user.activity.count == 3

    def test_days_follow_configured_time_zone(self) -> None:
        """Calendar days are taken in the tracker's zone, not in UTC."""
        # 2026-03-09 23:00 in New York, then 2026-03-10 11:00 in New York
        last = datetime(2026, 3, 10, 3, 0, tzinfo=UTC)
        now = datetime(2026, 3, 10, 15, 0, tzinfo=UTC)

        in_new_york = StreakTracker(timezone=ZoneInfo("America/New_York")).touch(
            make_user(count=2, last_active_at=last), now
        )
        in_utc = StreakTracker().touch(make_user(count=2, last_active_at=last), now)

        assert in_new_york.activity.count == 3
        assert in_new_york.activity.active_days == ("2026-03-10",)
        assert in_utc.activity.count == 2

    def test_active_days_are_capped(self) -> None:
        """Only the newest entries are kept, oldest dropped first."""
        start = date(2026, 1, 1)
        days = tuple((start + timedelta(days=i)).isoformat() for i in range(90))
        last = datetime.combine(start + timedelta(days=89), datetime.min.time(), tzinfo=UTC)
        now = last + timedelta(days=1)

        user = StreakTracker().touch(
            make_user(count=90, last_active_at=last, active_days=days), now
        )

        assert len(user.activity.active_days) == 90
        assert user.activity.active_days[0] == "2026-01-02"
        assert user.activity.active_days[-1] == now.date().isoformat()
        assert user.activity.count == 91

    def test_custom_active_days_limit(self) -> None:
        """The log length follows the configured limit."""
        tracker = StreakTracker(active_days_limit=2)
        user = make_user()
        for day in (1, 2, 3):
            user = tracker.touch(user, datetime(2026, 2, day, tzinfo=UTC))

        assert user.activity.active_days == ("2026-02-02", "2026-02-03")
        assert user.activity.count == 3

    @pytest.mark.parametrize("limit", [0, -5])
    def test_active_days_limit_must_be_positive(self, limit: int) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            StreakTracker(active_days_limit=limit)

    def test_limit_of_one_keeps_only_today(self) -> None:
        tracker = StreakTracker(active_days_limit=1)
        user = make_user()
        for day in (1, 2):
            user = tracker.touch(user, datetime(2026, 2, day, tzinfo=UTC))

        assert user.activity.active_days == ("2026-02-02",)

    def test_active_days_stay_unique_across_repeated_touches(self) -> None:
        """Touching many times a day never duplicates the day."""
        tracker = StreakTracker()
        user = make_user()
        for hour in range(0, 24, 3):
            user = tracker.touch(user, datetime(2026, 2, 20, hour, tzinfo=UTC))

        assert user.activity.active_days == ("2026-02-20",)


class TestActivityStreak:
    """Tests for the ActivityStreak value object."""

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ActivityStreak(count=-1)

    def test_duplicate_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ActivityStreak(count=1, active_days=("2026-02-20", "2026-02-20"))

    def test_recent_days(self) -> None:
        """Recent days are the tail of the log, oldest first."""
        streak = ActivityStreak(count=3, active_days=("2026-02-18", "2026-02-19", "2026-02-20"))

        assert streak.recent_days(2) == ["2026-02-19", "2026-02-20"]
        assert streak.recent_days(10) == ["2026-02-18", "2026-02-19", "2026-02-20"]

    def test_new_user_starts_at_one(self) -> None:
        now = datetime(2026, 2, 20, tzinfo=UTC)
        user = User.create("new@example.com", "New", None, now=now)

        assert user.activity.count == 1
        assert user.activity.last_active_at == now
        assert user.activity.active_days == ()
