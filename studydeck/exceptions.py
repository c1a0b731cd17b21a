"""Custom exception hierarchy for the StudyDeck application."""

from fastapi import HTTPException
from starlette import status


class StudyDeckError(Exception):
    """Base exception for all StudyDeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class StorageError(StudyDeckError):
    """
    A persistence call failed.

    Raised by repositories after rolling back the failed write. Writes that were
    committed earlier in the same operation stay committed.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("Storage failure", status_code=500)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
