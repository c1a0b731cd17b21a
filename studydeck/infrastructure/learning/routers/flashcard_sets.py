"""API routes for flashcard set management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from studydeck.application.learning.use_cases.dtos import SyncedSet
from studydeck.application.learning.use_cases.flashcard_set_sync_use_case import (
    FlashcardSetSyncUseCase,
)
from studydeck.application.learning.use_cases.flashcard_set_use_case import (
    FlashcardSetUseCase,
)
from studydeck.core import container
from studydeck.domain.common.exceptions import DomainError
from studydeck.domain.identity.entities.user import User
from studydeck.exceptions import StudyDeckError
from studydeck.infrastructure.common.di import inject_use_case
from studydeck.infrastructure.common.schemas import SuccessResponse
from studydeck.infrastructure.identity.dependencies import get_current_user
from studydeck.infrastructure.learning.schemas import (
    AddCardRequest,
    AddCardResponse,
    Flashcard,
    FlashcardSet,
    FlashcardSetCreateRequest,
    FlashcardSetDeleteResponse,
    FlashcardSetsListResponse,
    FlashcardSetUpdateRequest,
    FlashcardSetWithCardsResponse,
    FlashcardSetWithCount,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sets", tags=["flashcard-sets"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


def _synced_response(synced: SyncedSet) -> FlashcardSetWithCardsResponse:
    return FlashcardSetWithCardsResponse(
        set=FlashcardSet.from_entity(synced.flashcard_set),
        cards=[Flashcard.from_entity(card) for card in synced.flashcards],
    )


@router.post(
    "",
    response_model=FlashcardSetWithCardsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_set(
    request: FlashcardSetCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetSyncUseCase = Depends(
        inject_use_case(container.flashcard_set_sync_use_case)
    ),
) -> FlashcardSetWithCardsResponse:
    """
    Create a set and its cards.

    Cards are created in the submitted order. Unless ``content_type`` is raw
    or omitted, each back is generated from the definition; a failed
    generation keeps the definition as the back.
    """
    try:
        synced = await use_case.create_set(
            user_id=current_user.id.value,
            title=request.title,
            description=request.description,
            cards=[card.to_input() for card in request.cards],
            content_type=request.content_type,
        )
        return _synced_response(synced)
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create flashcard set", e) from e


@router.get("", response_model=FlashcardSetsListResponse, status_code=status.HTTP_200_OK)
def list_sets(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSetsListResponse:
    """Get all sets of the current user, newest first, with card counts."""
    try:
        summaries = use_case.list_sets(current_user.id.value)
        return FlashcardSetsListResponse(
            sets=[
                FlashcardSetWithCount(
                    **FlashcardSet.from_entity(summary.flashcard_set).model_dump(),
                    card_count=summary.card_count,
                )
                for summary in summaries
            ]
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list flashcard sets", e) from e


@router.get(
    "/{set_id}",
    response_model=FlashcardSetWithCardsResponse,
    status_code=status.HTTP_200_OK,
)
def get_set(
    set_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSetWithCardsResponse:
    """Get a set with all of its cards."""
    try:
        details = use_case.get_set_details(current_user.id.value, set_id)
        return FlashcardSetWithCardsResponse(
            set=FlashcardSet.from_entity(details.flashcard_set),
            cards=[Flashcard.from_entity(card) for card in details.flashcards],
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get flashcard set {set_id}", e) from e


@router.put(
    "/{set_id}",
    response_model=FlashcardSetWithCardsResponse,
    status_code=status.HTTP_200_OK,
)
async def update_set(
    set_id: int,
    request: FlashcardSetUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetSyncUseCase = Depends(
        inject_use_case(container.flashcard_set_sync_use_case)
    ),
) -> FlashcardSetWithCardsResponse:
    """
    Update a set and replace all of its cards with the submitted ones.

    Title and description are only changed when provided.
    """
    try:
        synced = await use_case.update_set(
            user_id=current_user.id.value,
            set_id=set_id,
            title=request.title,
            description=request.description,
            cards=[card.to_input() for card in request.cards],
            content_type=request.content_type,
        )
        return _synced_response(synced)
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update flashcard set {set_id}", e) from e


@router.delete(
    "/{set_id}",
    response_model=FlashcardSetDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_set(
    set_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> FlashcardSetDeleteResponse:
    """Delete a set and all of its cards."""
    try:
        deleted_cards = use_case.delete_set(current_user.id.value, set_id)
        return FlashcardSetDeleteResponse(
            success=True,
            message="Flashcard set deleted successfully",
            deleted_cards=deleted_cards,
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete flashcard set {set_id}", e) from e


@router.post(
    "/{set_id}/cards",
    response_model=AddCardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_card(
    set_id: int,
    request: AddCardRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> AddCardResponse:
    """Append one card to a set."""
    try:
        synced_card = await use_case.add_card(
            user_id=current_user.id.value,
            set_id=set_id,
            card=request.to_input(),
            content_type=request.content_type,
        )
        return AddCardResponse(
            success=True,
            message="Flashcard created successfully",
            flashcard=Flashcard.from_entity(synced_card.flashcard),
        )
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"add card to flashcard set {set_id}", e) from e


@router.delete(
    "/{set_id}/cards/{flashcard_id}",
    response_model=SuccessResponse,
    status_code=status.HTTP_200_OK,
)
def delete_card(
    set_id: int,
    flashcard_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FlashcardSetUseCase = Depends(inject_use_case(container.flashcard_set_use_case)),
) -> SuccessResponse:
    """Delete one card from a set."""
    try:
        use_case.delete_card(current_user.id.value, set_id, flashcard_id)
        return SuccessResponse(success=True, message="Flashcard deleted successfully")
    except (StudyDeckError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete flashcard {flashcard_id}", e) from e
