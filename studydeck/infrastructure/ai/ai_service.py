import structlog

from studydeck.application.learning.protocols.content_generator import ContentGenerationError
from studydeck.feature_flags import is_ai_enabled
from studydeck.infrastructure.ai.ai_agents import (
    SUPPORTED_CONTENT_TYPES,
    get_card_content_agent,
)

logger = structlog.get_logger(__name__)

# Definitions longer than this are cut before being sent to the model
MAX_INPUT_CHARS = 10000


class AIService:
    """Content generator backed by pydantic-ai agents."""

    async def generate(self, text: str, content_type: str) -> str:
        """
        Rewrite a card definition in the given style.

        Every failure is reported as ``ContentGenerationError``.
        """
        if not is_ai_enabled():
            raise ContentGenerationError("AI features are disabled")
        if content_type not in SUPPORTED_CONTENT_TYPES:
            raise ContentGenerationError(f"Unsupported content type: {content_type}")

        try:
            agent = get_card_content_agent(content_type)
            result = await agent.run(text[:MAX_INPUT_CHARS])
        except Exception as e:
            logger.warning("ai_generation_error", content_type=content_type, error=str(e))
            raise ContentGenerationError(f"Generation failed: {e}") from e

        output = result.output.strip()
        if not output:
            raise ContentGenerationError("Model returned empty output")
        return output
