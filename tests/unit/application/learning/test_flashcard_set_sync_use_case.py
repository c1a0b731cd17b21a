"""Unit tests for FlashcardSetSyncUseCase."""

from datetime import UTC, datetime

import pytest

from studydeck.application.learning.services.card_content import (
    CardContentResolver,
    Fallback,
    Generated,
    Verbatim,
)
from studydeck.application.learning.use_cases.dtos import CardInput
from studydeck.application.learning.use_cases.flashcard_set_sync_use_case import (
    FlashcardSetSyncUseCase,
)
from studydeck.domain.common.exceptions import AuthorizationError, ValidationError
from studydeck.domain.common.value_objects import FlashcardSetId
from studydeck.domain.learning.exceptions import FlashcardSetNotFoundError
from studydeck.exceptions import StorageError
from tests.fakes import FakeContentGenerator, FakeFlashcardRepository, FakeFlashcardSetRepository

NOW = datetime(2026, 2, 20, 12, 0, tzinfo=UTC)

CARDS = [
    CardInput(term="Mitosis", definition="cell division"),
    CardInput(term="Osmosis", definition="water diffusion"),
    CardInput(term="Enzyme", definition="biological catalyst"),
]


@pytest.fixture
def set_repository() -> FakeFlashcardSetRepository:
    return FakeFlashcardSetRepository()


@pytest.fixture
def flashcard_repository() -> FakeFlashcardRepository:
    return FakeFlashcardRepository()


@pytest.fixture
def generator() -> FakeContentGenerator:
    return FakeContentGenerator()


def make_use_case(
    set_repository: FakeFlashcardSetRepository,
    flashcard_repository: FakeFlashcardRepository,
    generator: FakeContentGenerator,
) -> FlashcardSetSyncUseCase:
    return FlashcardSetSyncUseCase(
        set_repository=set_repository,
        flashcard_repository=flashcard_repository,
        content_resolver=CardContentResolver(generator),
        clock=lambda: NOW,
    )


@pytest.fixture
def use_case(
    set_repository: FakeFlashcardSetRepository,
    flashcard_repository: FakeFlashcardRepository,
    generator: FakeContentGenerator,
) -> FlashcardSetSyncUseCase:
    return make_use_case(set_repository, flashcard_repository, generator)


class TestCreateSet:
    """Tests for create_set."""

    @pytest.mark.asyncio
    async def test_create_without_cards(
        self,
        use_case: FlashcardSetSyncUseCase,
        set_repository: FakeFlashcardSetRepository,
        flashcard_repository: FakeFlashcardRepository,
    ) -> None:
        """An empty card list still persists the set."""
        result = await use_case.create_set(1, "Biology", "Chapter 1", [])

        assert result.flashcard_set.id.is_persisted
        assert result.cards == ()
        assert len(set_repository.sets) == 1
        assert flashcard_repository.cards == {}

    @pytest.mark.asyncio
    async def test_raw_mode_never_calls_generator(
        self, use_case: FlashcardSetSyncUseCase, generator: FakeContentGenerator
    ) -> None:
        """Without a content type every back is the definition itself."""
        result = await use_case.create_set(1, "Biology", None, CARDS)

        assert generator.calls == []
        assert [c.back for c in result.flashcards] == [c.definition for c in CARDS]
        assert all(isinstance(c.content, Verbatim) for c in result.cards)
        assert all(c.content_type == "raw" for c in result.flashcards)

    @pytest.mark.asyncio
    async def test_single_raw_card(self, use_case: FlashcardSetSyncUseCase) -> None:
        result = await use_case.create_set(
            1, "Bio", None, [CardInput("cell", "basic unit of life")], content_type="raw"
        )

        assert len(result.flashcards) == 1
        assert result.flashcards[0].front == "cell"
        assert result.flashcards[0].back == "basic unit of life"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", ["raw", "simplify"])
    async def test_definition_whitespace_is_preserved(
        self,
        set_repository: FakeFlashcardSetRepository,
        flashcard_repository: FakeFlashcardRepository,
        content_type: str,
    ) -> None:
        """Raw and fallback backs equal the definition byte for byte."""
        definition = "  basic unit\nof life \n"
        generator = FakeContentGenerator(failing={definition})
        use_case = make_use_case(set_repository, flashcard_repository, generator)

        result = await use_case.create_set(
            1, "Bio", None, [CardInput("cell", definition)], content_type=content_type
        )

        assert result.flashcards[0].back == definition
        assert result.cards[0].content.text == definition
        stored = flashcard_repository.find_by_set(result.flashcard_set.id)
        assert stored[0].back == definition

    @pytest.mark.asyncio
    async def test_explicit_raw_mode(
        self, use_case: FlashcardSetSyncUseCase, generator: FakeContentGenerator
    ) -> None:
        await use_case.create_set(1, "Biology", None, CARDS, content_type="raw")

        assert generator.calls == []

    @pytest.mark.asyncio
    async def test_generated_backs_keep_input_order(
        self, use_case: FlashcardSetSyncUseCase, generator: FakeContentGenerator
    ) -> None:
        """Cards are generated one by one in input order."""
        result = await use_case.create_set(1, "Biology", None, CARDS, content_type="simplify")

        assert generator.calls == [(c.definition, "simplify") for c in CARDS]
        assert [c.front for c in result.flashcards] == ["Mitosis", "Osmosis", "Enzyme"]
        assert [c.back for c in result.flashcards] == [
            "[simplify] CELL DIVISION",
            "[simplify] WATER DIFFUSION",
            "[simplify] BIOLOGICAL CATALYST",
        ]
        assert all(isinstance(c.content, Generated) for c in result.cards)
        ids = [c.id.value for c in result.flashcards]
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_generation_failure_falls_back_to_definition(
        self,
        set_repository: FakeFlashcardSetRepository,
        flashcard_repository: FakeFlashcardRepository,
    ) -> None:
        """A failed card keeps its definition and the others are unaffected."""
        generator = FakeContentGenerator(failing={"water diffusion"})
        use_case = make_use_case(set_repository, flashcard_repository, generator)

        result = await use_case.create_set(1, "Biology", None, CARDS, content_type="explain")

        assert len(result.cards) == len(CARDS)
        assert [c.back for c in result.flashcards] == [
            "[explain] CELL DIVISION",
            "water diffusion",
            "[explain] BIOLOGICAL CATALYST",
        ]
        fallback = result.cards[1].content
        assert isinstance(fallback, Fallback)
        assert "quota exceeded" in fallback.reason
        assert result.fallback_count == 1
        assert len(generator.calls) == 3

    @pytest.mark.asyncio
    async def test_all_generations_fail(
        self,
        set_repository: FakeFlashcardSetRepository,
        flashcard_repository: FakeFlashcardRepository,
    ) -> None:
        generator = FakeContentGenerator(failing={c.definition for c in CARDS})
        use_case = make_use_case(set_repository, flashcard_repository, generator)

        result = await use_case.create_set(1, "Biology", None, CARDS, content_type="summary")

        assert result.fallback_count == 3
        assert [c.back for c in result.flashcards] == [c.definition for c in CARDS]

    @pytest.mark.asyncio
    async def test_cards_belong_to_set_owner(self, use_case: FlashcardSetSyncUseCase) -> None:
        result = await use_case.create_set(5, "Biology", None, CARDS)

        for card in result.flashcards:
            assert card.user_id.value == 5
            assert card.set_id == result.flashcard_set.id
            assert card.next_review_at == NOW

    @pytest.mark.asyncio
    async def test_invalid_title_writes_nothing(
        self, use_case: FlashcardSetSyncUseCase, set_repository: FakeFlashcardSetRepository
    ) -> None:
        with pytest.raises(ValidationError):
            await use_case.create_set(1, "   ", None, CARDS)

        assert set_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_storage_failure_keeps_committed_prefix(
        self, set_repository: FakeFlashcardSetRepository, generator: FakeContentGenerator
    ) -> None:
        """When card i cannot be saved, the set and cards before it remain."""
        flashcard_repository = FakeFlashcardRepository(fail_on_save=3)
        use_case = make_use_case(set_repository, flashcard_repository, generator)

        with pytest.raises(StorageError):
            await use_case.create_set(1, "Biology", None, CARDS)

        assert len(set_repository.sets) == 1
        assert [c.front for c in flashcard_repository.cards.values()] == ["Mitosis", "Osmosis"]


class TestUpdateSet:
    """Tests for update_set."""

    @pytest.mark.asyncio
    async def test_update_replaces_all_cards(
        self,
        use_case: FlashcardSetSyncUseCase,
        flashcard_repository: FakeFlashcardRepository,
    ) -> None:
        created = await use_case.create_set(1, "Biology", "Old", CARDS)
        set_id = created.flashcard_set.id.value

        result = await use_case.update_set(
            1,
            set_id,
            title="Cell biology",
            description=None,
            cards=[CardInput(term="Ribosome", definition="protein factory")],
        )

        assert result.flashcard_set.title == "Cell biology"
        assert result.flashcard_set.description == "Old"
        assert [c.front for c in flashcard_repository.cards.values()] == ["Ribosome"]
        assert [c.front for c in result.flashcards] == ["Ribosome"]

    @pytest.mark.asyncio
    async def test_update_with_no_cards_empties_set(
        self,
        use_case: FlashcardSetSyncUseCase,
        flashcard_repository: FakeFlashcardRepository,
    ) -> None:
        created = await use_case.create_set(1, "Biology", None, CARDS)

        result = await use_case.update_set(
            1, created.flashcard_set.id.value, title=None, description=None, cards=[]
        )

        assert result.cards == ()
        assert flashcard_repository.cards == {}

    @pytest.mark.asyncio
    async def test_update_leaves_other_sets_alone(
        self,
        use_case: FlashcardSetSyncUseCase,
        flashcard_repository: FakeFlashcardRepository,
    ) -> None:
        first = await use_case.create_set(1, "Biology", None, CARDS[:1])
        second = await use_case.create_set(1, "Physics", None, CARDS[1:])

        await use_case.update_set(1, first.flashcard_set.id.value, None, None, [])

        remaining = flashcard_repository.find_by_set(second.flashcard_set.id)
        assert len(remaining) == 2

    @pytest.mark.asyncio
    async def test_update_missing_set(self, use_case: FlashcardSetSyncUseCase) -> None:
        with pytest.raises(FlashcardSetNotFoundError):
            await use_case.update_set(1, 999, "Title", None, CARDS)

    @pytest.mark.asyncio
    async def test_non_owner_update_changes_nothing(
        self,
        use_case: FlashcardSetSyncUseCase,
        set_repository: FakeFlashcardSetRepository,
        flashcard_repository: FakeFlashcardRepository,
        generator: FakeContentGenerator,
    ) -> None:
        """Ownership is checked before any write."""
        created = await use_case.create_set(1, "Biology", "Mine", CARDS, content_type="example")
        set_id = created.flashcard_set.id.value
        set_saves = set_repository.save_calls
        card_saves = flashcard_repository.save_calls
        generator.calls.clear()

        with pytest.raises(AuthorizationError):
            await use_case.update_set(
                2, set_id, "Stolen", "Theirs", [CardInput("x", "y")], content_type="example"
            )

        stored = set_repository.find_by_id(FlashcardSetId(set_id))
        assert stored is not None
        assert stored.title == "Biology"
        assert stored.description == "Mine"
        assert set_repository.save_calls == set_saves
        assert flashcard_repository.save_calls == card_saves
        assert len(flashcard_repository.find_by_set(FlashcardSetId(set_id))) == 3
        assert generator.calls == []

    @pytest.mark.asyncio
    async def test_update_generates_with_new_content_type(
        self, use_case: FlashcardSetSyncUseCase, generator: FakeContentGenerator
    ) -> None:
        created = await use_case.create_set(1, "Biology", None, CARDS)

        result = await use_case.update_set(
            1, created.flashcard_set.id.value, None, None, CARDS[:2], content_type="mnemonic"
        )

        assert [c.content_type for c in result.flashcards] == ["mnemonic", "mnemonic"]
        assert len(generator.calls) == 2


class TestCardInput:
    @pytest.mark.parametrize(("term", "definition"), [("", "d"), ("t", ""), ("  ", "d")])
    def test_empty_fields_rejected(self, term: str, definition: str) -> None:
        with pytest.raises(ValidationError):
            CardInput(term=term, definition=definition)
