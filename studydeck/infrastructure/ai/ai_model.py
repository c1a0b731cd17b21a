from functools import lru_cache

from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import Model, OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from studydeck.config import get_settings


def _get_model() -> Model:
    """
    Get Pydantic AI model depending on environment settings.
    """
    settings = get_settings()
    # Model name and provider keys are guaranteed by the settings validator
    model_name = settings.AI_MODEL_NAME
    assert model_name is not None

    if settings.AI_PROVIDER == "ollama":
        assert settings.OPENAI_BASE_URL is not None
        return OpenAIChatModel(
            model_name=model_name,
            provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
        )

    if settings.AI_PROVIDER == "openai":
        assert settings.OPENAI_API_KEY is not None
        return OpenAIChatModel(
            model_name=model_name,
            provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
        )

    if settings.AI_PROVIDER == "anthropic":
        assert settings.ANTHROPIC_API_KEY is not None
        return AnthropicModel(
            model_name=model_name,
            provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
        )

    if settings.AI_PROVIDER == "google":
        assert settings.GEMINI_API_KEY is not None
        return GoogleModel(
            model_name=model_name,
            provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
        )
    raise ValueError(f"No such AI model provider available: {settings.AI_PROVIDER}")


@lru_cache
def get_ai_model() -> Model:
    """
    Get cached AI model. The model is only built the first time a card is
    generated, so nothing AI related is loaded while AI is switched off.
    """
    return _get_model()
