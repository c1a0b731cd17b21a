"""Use case for user registration."""

import structlog

from studydeck.application.common.clock import Clock, utc_now
from studydeck.application.identity.protocols.password_service import PasswordServiceProtocol
from studydeck.application.identity.protocols.token_service import TokenServiceProtocol
from studydeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
)
from studydeck.feature_flags import is_user_registrations_enabled
from studydeck.infrastructure.identity.services.token_service import TokenWithRefresh

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service
        self.clock = clock

    def register_user(
        self, email: str, password: str, name: str = ""
    ) -> tuple[User, TokenWithRefresh]:
        """
        Register a new user account.

        The new user starts with a streak of 1 as of the registration instant.

        Args:
            email: User's email address
            password: User's plain text password (will be hashed)
            name: Display name

        Returns:
            Tuple of (created user, token pair for immediate login)

        Raises:
            RegistrationDisabledError: If registration is disabled via feature flag
            EmailAlreadyExistsError: If email is already registered
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        if self.user_repository.find_by_email(email):
            raise EmailAlreadyExistsError(email)

        hashed_password = self.password_service.hash_password(password)

        user = User.create(
            email=email, name=name, hashed_password=hashed_password, now=self.clock()
        )
        user = self.user_repository.save(user)
        token_pair = self.token_service.create_token_pair(user.id.value)

        logger.info("user_registered", user_id=user.id.value, email=email)

        return user, token_pair
