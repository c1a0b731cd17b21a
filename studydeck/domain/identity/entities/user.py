"""User entity for identity management."""

from dataclasses import dataclass, field
from datetime import datetime

from studydeck.domain.common.entity import Entity
from studydeck.domain.common.exceptions import ValidationError
from studydeck.domain.common.value_objects.ids import UserId
from studydeck.domain.identity.value_objects.activity_streak import ActivityStreak

# Domain constraints
MAX_EMAIL_LENGTH = 100
MAX_NAME_LENGTH = 100


@dataclass
class User(Entity[UserId]):
    """
    User entity representing an authenticated user in the system.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - Email must be non-empty and at most MAX_EMAIL_LENGTH chars
    - A new user starts with a streak of 1 at registration time
    - Only the streak tracker changes the activity streak
    """

    id: UserId
    email: str
    name: str = ""
    hashed_password: str | None = None
    activity: ActivityStreak = field(default_factory=lambda: ActivityStreak(count=0))
    reminder_enabled: bool = False
    reminder_time: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._validate_email(self.email)
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=self.name
            )

    @staticmethod
    def _validate_email(email: str) -> None:
        if not email:
            raise ValidationError("Email cannot be empty", field="email", value=email)
        if len(email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
            )

    def record_activity(self, activity: ActivityStreak) -> None:
        """Replace the activity streak with a newly computed one."""
        self.activity = activity

    def update_details(
        self,
        name: str | None = None,
        email: str | None = None,
        reminder_enabled: bool | None = None,
        reminder_time: str | None = None,
    ) -> None:
        """
        Update profile fields. Fields left as None keep their current value.

        Raises:
            ValidationError: If the new email or name is invalid
        """
        if name:
            if len(name) > MAX_NAME_LENGTH:
                raise ValidationError(
                    f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
                )
            self.name = name
        if email:
            self._validate_email(email)
            self.email = email
        if reminder_enabled is not None:
            self.reminder_enabled = reminder_enabled
        if reminder_time:
            self.reminder_time = reminder_time

    def update_password(self, new_hashed_password: str) -> None:
        """Update the password (hashing is done by infrastructure)."""
        self.hashed_password = new_hashed_password

    @classmethod
    def create(
        cls, email: str, name: str, hashed_password: str | None, now: datetime
    ) -> "User":
        """
        Create a new user.

        Args:
            email: User's email address
            name: Display name
            hashed_password: User's hashed password
            now: Registration instant, which also starts the streak

        Raises:
            ValidationError: If email is invalid
        """
        return cls(
            id=UserId.generate(),
            email=email,
            name=name,
            hashed_password=hashed_password,
            activity=ActivityStreak.started_at(now),
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        name: str,
        hashed_password: str | None,
        activity: ActivityStreak,
        reminder_enabled: bool,
        reminder_time: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            name=name,
            hashed_password=hashed_password,
            activity=activity,
            reminder_enabled=reminder_enabled,
            reminder_time=reminder_time,
            created_at=created_at,
            updated_at=updated_at,
        )
