"""API routes for flashcard review."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from studydeck.application.learning.use_cases.flashcard_review_use_case import (
    FlashcardReviewUseCase,
)
from studydeck.core import container
from studydeck.domain.common.exceptions import DomainError
from studydeck.domain.identity.entities.user import User
from studydeck.exceptions import StudyDeckError
from studydeck.infrastructure.common.di import inject_use_case
from studydeck.infrastructure.identity.dependencies import get_current_user
from studydeck.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardsListResponse,
    FlashcardStatusUpdateRequest,
    FlashcardStatusUpdateResponse,
    StudyStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.get("/due", response_model=FlashcardsListResponse, status_code=status.HTTP_200_OK)
def get_due_flashcards(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardReviewUseCase = Depends(
        inject_use_case(container.flashcard_review_use_case)
    ),
) -> FlashcardsListResponse:
    """Get the current user's cards due for review, earliest first."""
    try:
        cards = use_case.get_due_cards(current_user.id.value)
        return FlashcardsListResponse(flashcards=[Flashcard.from_entity(card) for card in cards])
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get due flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/stats", response_model=StudyStatsResponse, status_code=status.HTTP_200_OK)
def get_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardReviewUseCase = Depends(
        inject_use_case(container.flashcard_review_use_case)
    ),
) -> StudyStatsResponse:
    """Get set count, mastered card count and streak. Does not touch the streak."""
    try:
        stats = use_case.get_stats(current_user.id.value)
        return StudyStatsResponse(
            total_sets=stats.total_sets,
            cards_mastered=stats.cards_mastered,
            streak=stats.streak,
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get stats: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put(
    "/{flashcard_id}/status",
    response_model=FlashcardStatusUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_flashcard_status(
    flashcard_id: int,
    request: FlashcardStatusUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardReviewUseCase = Depends(
        inject_use_case(container.flashcard_review_use_case)
    ),
) -> FlashcardStatusUpdateResponse:
    """
    Mark a card as learning or mastered.

    Mastered cards come back for review after a few days; learning cards stay due.
    """
    try:
        flashcard = use_case.update_card_status(
            user_id=current_user.id.value,
            flashcard_id=flashcard_id,
            status=request.status,
        )
        return FlashcardStatusUpdateResponse(
            success=True,
            message="Flashcard status updated successfully",
            flashcard=Flashcard.from_entity(flashcard),
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
