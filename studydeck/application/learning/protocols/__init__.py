from .content_generator import ContentGenerationError, ContentGeneratorProtocol
from .flashcard_repository import FlashcardRepositoryProtocol
from .flashcard_set_repository import FlashcardSetRepositoryProtocol

__all__ = [
    "ContentGenerationError",
    "ContentGeneratorProtocol",
    "FlashcardRepositoryProtocol",
    "FlashcardSetRepositoryProtocol",
]
