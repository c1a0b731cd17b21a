import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from studydeck.application.identity.use_cases.activity_streak_use_case import (
    ActivityStreakUseCase,
)
from studydeck.application.identity.use_cases.delete_account_use_case import (
    DeleteAccountUseCase,
)
from studydeck.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from studydeck.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from studydeck.config import get_settings
from studydeck.core import container
from studydeck.domain.common.exceptions import DomainError
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    PasswordVerificationError,
    RegistrationDisabledError,
)
from studydeck.exceptions import StudyDeckError
from studydeck.infrastructure.common.di import inject_use_case
from studydeck.infrastructure.common.rate_limit import limiter
from studydeck.infrastructure.common.schemas import SuccessResponse
from studydeck.infrastructure.identity.dependencies import get_current_user
from studydeck.infrastructure.identity.routers.auth import set_refresh_cookie
from studydeck.infrastructure.identity.schemas import (
    PasswordUpdateRequest,
    StreakResponse,
    UserDetailsResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)
from studydeck.infrastructure.identity.services.token_service import TokenWithRefresh

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])
settings = get_settings()


def _to_details(user: User) -> UserDetailsResponse:
    return UserDetailsResponse(
        id=user.id.value,
        email=user.email,
        name=user.name,
        streak=user.activity.count,
        last_active_date=user.activity.last_active_at,
        reminder_enabled=user.reminder_enabled,
        reminder_time=user.reminder_time,
    )


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("/register")
@limiter.limit("5/minute")
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenWithRefresh:
    """
    Register a new user account.

    Returns a token pair for immediate login after registration.
    """
    try:
        _, token_pair = use_case.register_user(
            register_data.email, register_data.password, register_data.name
        )
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except RegistrationDisabledError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registration is currently disabled",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (StudyDeckError, DomainError, HTTPException):
        raise
    except Exception as e:
        raise _unexpected("register user", e) from e


@router.get("/me")
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: ActivityStreakUseCase = Depends(inject_use_case(container.activity_streak_use_case)),
) -> UserDetailsResponse:
    """Get the current user's profile. Counts as activity for the streak."""
    try:
        user = use_case.touch_user(current_user)
        return _to_details(user)
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"load user {current_user.id.value}", e) from e


@router.post("/me")
async def update_me(
    current_user: Annotated[User, Depends(get_current_user)],
    update_data: UserUpdateRequest,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserDetailsResponse:
    """Update the current user's details. Omitted fields keep their value."""
    try:
        user = use_case.update_details(
            user_id=current_user.id.value,
            name=update_data.name,
            email=update_data.email,
            reminder_enabled=update_data.reminder_enabled,
            reminder_time=update_data.reminder_time,
        )
        return _to_details(user)
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already in use",
        ) from None
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update user {current_user.id.value}", e) from e


@router.post("/me/password")
async def update_password(
    current_user: Annotated[User, Depends(get_current_user)],
    password_data: PasswordUpdateRequest,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> SuccessResponse:
    """Change the current user's password."""
    try:
        use_case.update_password(
            user_id=current_user.id.value,
            current_password=password_data.current_password,
            new_password=password_data.new_password,
        )
        return SuccessResponse(success=True, message="Password updated successfully")
    except PasswordVerificationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        ) from None
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update password for user {current_user.id.value}", e) from e


@router.delete("/me")
async def delete_me(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteAccountUseCase = Depends(inject_use_case(container.delete_account_use_case)),
) -> SuccessResponse:
    """Delete the current user together with all of their sets and cards."""
    try:
        use_case.delete_account(current_user.id.value)
        return SuccessResponse(success=True, message="Account deleted successfully")
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete user {current_user.id.value}", e) from e


@router.get("/me/streak")
async def get_streak(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: ActivityStreakUseCase = Depends(inject_use_case(container.activity_streak_use_case)),
) -> StreakResponse:
    """
    Get the current user's streak. Counts as activity for the streak.

    Only the most recent active days are returned, although more are kept.
    """
    try:
        user = use_case.touch_user(current_user)
        return StreakResponse(
            streak=user.activity.count,
            last_active_date=user.activity.last_active_at,
            active_days=user.activity.recent_days(settings.ACTIVE_DAYS_RESPONSE_LIMIT),
            name=user.name,
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"load streak for user {current_user.id.value}", e) from e
