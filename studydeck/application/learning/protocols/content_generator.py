from typing import Protocol


class ContentGenerationError(Exception):
    """
    The generator could not produce text.

    Raised for every kind of failure (timeouts, quota, empty output, unknown
    style, AI switched off) so callers only ever catch this one type.
    """


class ContentGeneratorProtocol(Protocol):
    async def generate(self, text: str, content_type: str) -> str:
        """
        Rewrite ``text`` in the style named by ``content_type``.

        Raises:
            ContentGenerationError: If no text could be generated
        """
        ...
