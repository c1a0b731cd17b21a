"""Use case for recording daily activity."""

import structlog
from structlog.stdlib import BoundLogger

from studydeck.application.common.clock import Clock, utc_now
from studydeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from studydeck.domain.common.value_objects.ids import UserId
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.exceptions import UserNotFoundError
from studydeck.domain.identity.services.streak_tracker import StreakTracker


class ActivityStreakUseCase:
    """Advances a user's streak whenever they show up."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        streak_tracker: StreakTracker,
        clock: Clock = utc_now,
        logger: BoundLogger | None = None,
    ) -> None:
        self.user_repository = user_repository
        self.streak_tracker = streak_tracker
        self.clock = clock
        self.logger = logger or structlog.get_logger(__name__)

    def touch(self, user_id: int) -> User:
        """
        Record activity for the user right now.

        The user is written back on every call, even when the streak and the
        activity log come out unchanged.

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If the user cannot be saved
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return self.touch_user(user)

    def touch_user(self, user: User) -> User:
        """Same as ``touch`` for a user that is already loaded."""
        previous = user.activity.count
        self.streak_tracker.touch(user, self.clock())
        user = self.user_repository.save(user)

        self.logger.info(
            "streak_touched",
            user_id=user.id.value,
            previous_streak=previous,
            streak=user.activity.count,
        )
        return user
