"""Use case for user profile management."""

import structlog

from studydeck.application.identity.protocols.password_service import PasswordServiceProtocol
from studydeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from studydeck.domain.common.value_objects.ids import UserId
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    PasswordVerificationError,
    UserNotFoundError,
)

logger = structlog.get_logger(__name__)


class UpdateUserUseCase:
    """Use case for user profile operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service

    def _load(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def update_details(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
        reminder_enabled: bool | None = None,
        reminder_time: str | None = None,
    ) -> User:
        """
        Update the user's profile details.

        Only provided fields are changed.

        Raises:
            UserNotFoundError: If user is not found
            EmailAlreadyExistsError: If the email belongs to another account
            ValidationError: If a field is invalid
        """
        user = self._load(user_id)

        if email and email != user.email:
            other = self.user_repository.find_by_email(email)
            if other and other.id != user.id:
                raise EmailAlreadyExistsError(email)

        user.update_details(
            name=name,
            email=email,
            reminder_enabled=reminder_enabled,
            reminder_time=reminder_time,
        )
        user = self.user_repository.save(user)

        logger.info("user_profile_updated", user_id=user_id)

        return user

    def update_password(self, user_id: int, current_password: str, new_password: str) -> User:
        """
        Change the user's password.

        Raises:
            UserNotFoundError: If user is not found
            PasswordVerificationError: If current_password is incorrect
        """
        user = self._load(user_id)

        if not user.hashed_password or not self.password_service.verify_password(
            current_password, user.hashed_password
        ):
            raise PasswordVerificationError

        user.update_password(self.password_service.hash_password(new_password))
        user = self.user_repository.save(user)

        logger.info("user_password_updated", user_id=user_id)

        return user
