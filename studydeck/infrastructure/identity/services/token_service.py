"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from studydeck.config import get_settings

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
REFRESH_TOKEN_SECRET_KEY = settings.REFRESH_TOKEN_SECRET_KEY or SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS


class TokenWithRefresh(BaseModel):
    """DTO for token pair with access and refresh tokens."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int


def _encode(user_id: int, token_type: str, lifetime: timedelta, key: str) -> str:
    expire = datetime.now(UTC) + lifetime
    return jwt.encode(
        {"sub": str(user_id), "exp": expire, "type": token_type}, key, algorithm=ALGORITHM
    )


def _decode_subject(token: str, token_type: str, key: str) -> int | None:
    try:
        payload = jwt.decode(token, key, algorithms=[ALGORITHM])
        if payload.get("type") != token_type:
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None


def create_access_token(user_id: int) -> str:
    """Create an access token for a user."""
    return _encode(
        user_id, "access", timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES), SECRET_KEY
    )


def create_refresh_token(user_id: int) -> str:
    """Create a refresh token for a user."""
    return _encode(
        user_id, "refresh", timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS), REFRESH_TOKEN_SECRET_KEY
    )


def verify_access_token(token: str) -> int | None:
    """Verify an access token and return the user_id if valid.

    Refresh tokens are rejected; they are only accepted by the refresh endpoint.
    """
    return _decode_subject(token, "access", SECRET_KEY)


def verify_refresh_token(token: str) -> int | None:
    """Verify a refresh token and return the user_id if valid."""
    return _decode_subject(token, "refresh", REFRESH_TOKEN_SECRET_KEY)


def create_token_pair(user_id: int) -> TokenWithRefresh:
    """Create a token pair (access + refresh) for a user."""
    return TokenWithRefresh(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
        token_type="bearer",  # noqa: S106
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
