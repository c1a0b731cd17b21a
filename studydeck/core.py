from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from studydeck.application.identity.use_cases.activity_streak_use_case import (
    ActivityStreakUseCase,
)
from studydeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from studydeck.application.identity.use_cases.delete_account_use_case import (
    DeleteAccountUseCase,
)
from studydeck.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from studydeck.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from studydeck.application.learning.services.card_content import CardContentResolver
from studydeck.application.learning.use_cases.flashcard_review_use_case import (
    FlashcardReviewUseCase,
)
from studydeck.application.learning.use_cases.flashcard_set_sync_use_case import (
    FlashcardSetSyncUseCase,
)
from studydeck.application.learning.use_cases.flashcard_set_use_case import (
    FlashcardSetUseCase,
)
from studydeck.config import get_settings
from studydeck.domain.identity.services.streak_tracker import StreakTracker
from studydeck.infrastructure.ai.ai_service import AIService
from studydeck.infrastructure.identity.repositories.user_repository import UserRepository
from studydeck.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)
from studydeck.infrastructure.identity.services.token_service_adapter import TokenServiceAdapter
from studydeck.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from studydeck.infrastructure.learning.repositories.flashcard_set_repository import (
    FlashcardSetRepository,
)

settings = get_settings()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    flashcard_set_repository = providers.Factory(FlashcardSetRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)

    # Identity services
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # External content generator, overridden with fakes in tests
    content_generator = providers.Singleton(AIService)

    # Domain services (pure domain logic, no db)
    streak_tracker = providers.Singleton(
        StreakTracker,
        timezone=settings.streak_timezone,
        active_days_limit=settings.ACTIVE_DAYS_LIMIT,
    )

    # Application services
    card_content_resolver = providers.Factory(CardContentResolver, generator=content_generator)

    # Identity use cases
    activity_streak_use_case = providers.Factory(
        ActivityStreakUseCase,
        user_repository=user_repository,
        streak_tracker=streak_tracker,
    )

    update_user_use_case = providers.Factory(
        UpdateUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
    )

    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        activity_streak_use_case=activity_streak_use_case,
    )

    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )

    delete_account_use_case = providers.Factory(
        DeleteAccountUseCase,
        user_repository=user_repository,
        set_repository=flashcard_set_repository,
        flashcard_repository=flashcard_repository,
    )

    # Learning module use cases
    flashcard_set_sync_use_case = providers.Factory(
        FlashcardSetSyncUseCase,
        set_repository=flashcard_set_repository,
        flashcard_repository=flashcard_repository,
        content_resolver=card_content_resolver,
    )

    flashcard_set_use_case = providers.Factory(
        FlashcardSetUseCase,
        set_repository=flashcard_set_repository,
        flashcard_repository=flashcard_repository,
        content_resolver=card_content_resolver,
    )

    flashcard_review_use_case = providers.Factory(
        FlashcardReviewUseCase,
        flashcard_repository=flashcard_repository,
        set_repository=flashcard_set_repository,
        user_repository=user_repository,
        mastered_review_delay_days=settings.MASTERED_REVIEW_DELAY_DAYS,
    )


# Initialize container
container = Container()
