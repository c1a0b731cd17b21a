"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from studydeck.core import container
from studydeck.database import DatabaseSession
from studydeck.domain.identity.entities.user import User
from studydeck.domain.identity.exceptions import UserNotFoundError
from studydeck.exceptions import CredentialsException
from studydeck.infrastructure.identity.services.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Get the current authenticated user from the access token.

    Args:
        token: JWT access token from Authorization header
        db: Database session

    Returns:
        User domain entity

    Raises:
        CredentialsException: If token is invalid or user not found
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    try:
        container.db.override(db)
        use_case = container.authentication_use_case()
    finally:
        container.db.reset_override()

    try:
        return use_case.get_user_by_id(user_id)
    except UserNotFoundError:
        raise CredentialsException from None
