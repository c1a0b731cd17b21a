"""Use case for deleting a user account."""

import structlog

from studydeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from studydeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from studydeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from studydeck.domain.common.value_objects.ids import UserId
from studydeck.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class DeleteAccountUseCase:
    """Removes a user together with everything they own."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        set_repository: FlashcardSetRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.set_repository = set_repository
        self.flashcard_repository = flashcard_repository

    def delete_account(self, user_id: int) -> None:
        """
        Delete the user's cards, then their sets, then the user.

        Raises:
            UserNotFoundError: If the user does not exist
            StorageError: If a delete fails
        """
        uid = UserId(user_id)
        if not self.user_repository.find_by_id(uid):
            raise UserNotFoundError(user_id)

        deleted_cards = self.flashcard_repository.delete_by_user(uid)
        deleted_sets = self.set_repository.delete_by_user(uid)
        self.user_repository.delete(uid)

        logger.info(
            "user_account_deleted",
            user_id=user_id,
            deleted_sets=deleted_sets,
            deleted_cards=deleted_cards,
        )
