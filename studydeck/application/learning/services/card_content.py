"""
Resolution of a card's back text.

The outcome is a tagged value so callers and tests can tell a verbatim card,
a generated card and a card that fell back to its definition apart, while
the stored card only ever sees ``outcome.text``.
"""

from dataclasses import dataclass

import structlog
from structlog.stdlib import BoundLogger

from studydeck.application.learning.protocols.content_generator import (
    ContentGenerationError,
    ContentGeneratorProtocol,
)
from studydeck.domain.learning.entities.flashcard import is_raw


@dataclass(frozen=True)
class Verbatim:
    """Raw mode: the definition is used as is."""

    text: str


@dataclass(frozen=True)
class Generated:
    """The generator produced the text."""

    text: str


@dataclass(frozen=True)
class Fallback:
    """The generator failed, so the definition is used instead."""

    text: str
    reason: str


CardContent = Verbatim | Generated | Fallback


class CardContentResolver:
    """Decides the back of a card, calling the content generator when asked to."""

    def __init__(self, generator: ContentGeneratorProtocol) -> None:
        self.generator = generator

    async def resolve(
        self,
        definition: str,
        content_type: str | None,
        logger: BoundLogger | None = None,
    ) -> CardContent:
        """
        Produce the back text for ``definition``.

        Never raises for a generator failure: the definition comes back as a
        ``Fallback`` instead.
        """
        if is_raw(content_type):
            return Verbatim(definition)

        try:
            text = await self.generator.generate(definition, content_type)
        except ContentGenerationError as e:
            (logger or structlog.get_logger(__name__)).warning(
                "card_generation_failed", content_type=content_type, reason=str(e)
            )
            return Fallback(definition, reason=str(e))

        return Generated(text)
