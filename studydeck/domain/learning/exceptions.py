"""Learning domain exceptions."""

from studydeck.domain.common.exceptions import EntityNotFoundError


class FlashcardSetNotFoundError(EntityNotFoundError):
    """Raised when a flashcard set cannot be found."""

    def __init__(self, set_id: int) -> None:
        super().__init__("Flashcard set", set_id)


class FlashcardNotFoundError(EntityNotFoundError):
    """Raised when a flashcard cannot be found."""

    def __init__(self, flashcard_id: int) -> None:
        super().__init__("Flashcard", flashcard_id)
