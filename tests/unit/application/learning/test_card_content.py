"""Unit tests for CardContentResolver."""

from unittest.mock import AsyncMock

import pytest

from studydeck.application.learning.protocols.content_generator import ContentGenerationError
from studydeck.application.learning.services.card_content import (
    CardContentResolver,
    Fallback,
    Generated,
    Verbatim,
)


class TestCardContentResolver:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", [None, "", "raw"])
    async def test_raw_mode_is_verbatim(self, content_type: str | None) -> None:
        generator = AsyncMock()
        resolver = CardContentResolver(generator)

        content = await resolver.resolve("a definition", content_type)

        assert content == Verbatim("a definition")
        generator.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_generated(self) -> None:
        generator = AsyncMock()
        generator.generate.return_value = "simpler words"
        resolver = CardContentResolver(generator)

        content = await resolver.resolve("a definition", "simplify")

        assert content == Generated("simpler words")
        generator.generate.assert_awaited_once_with("a definition", "simplify")

    @pytest.mark.asyncio
    async def test_generation_error_falls_back(self) -> None:
        generator = AsyncMock()
        generator.generate.side_effect = ContentGenerationError("model unavailable")
        resolver = CardContentResolver(generator)

        content = await resolver.resolve("a definition", "explain")

        assert content == Fallback("a definition", reason="model unavailable")
        assert content.text == "a definition"

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self) -> None:
        """Only generation errors are turned into a fallback."""
        generator = AsyncMock()
        generator.generate.side_effect = RuntimeError("bug")
        resolver = CardContentResolver(generator)

        with pytest.raises(RuntimeError):
            await resolver.resolve("a definition", "explain")
