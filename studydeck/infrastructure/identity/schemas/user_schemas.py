"""Pydantic schemas for user API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

_REMINDER_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class UserRegisterRequest(BaseModel):
    """Schema for registering a new account."""

    email: str = Field(..., min_length=3, max_length=100, description="Email address")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    name: str = Field("", max_length=100, description="Display name")


class UserUpdateRequest(BaseModel):
    """Schema for updating profile details. Omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=100)
    reminder_enabled: bool | None = None
    reminder_time: str | None = Field(
        None, pattern=_REMINDER_TIME_PATTERN, description="Daily reminder as HH:MM"
    )


class PasswordUpdateRequest(BaseModel):
    """Schema for changing the password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128)


class UserDetailsResponse(BaseModel):
    """Schema for the current user's profile."""

    id: int
    email: str
    name: str
    streak: int
    last_active_date: datetime | None
    reminder_enabled: bool
    reminder_time: str | None


class StreakResponse(BaseModel):
    """Schema for the current user's streak."""

    streak: int
    last_active_date: datetime | None
    active_days: list[str] = Field(..., description="Most recent active days, oldest first")
    name: str
