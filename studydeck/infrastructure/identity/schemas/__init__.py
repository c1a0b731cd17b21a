"""Identity context schemas."""

from studydeck.infrastructure.identity.schemas.user_schemas import (
    PasswordUpdateRequest,
    StreakResponse,
    UserDetailsResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)

__all__ = [
    "PasswordUpdateRequest",
    "StreakResponse",
    "UserDetailsResponse",
    "UserRegisterRequest",
    "UserUpdateRequest",
]
