from pydantic_ai import Agent

from studydeck.infrastructure.ai.ai_model import get_ai_model

_COMMON_RULES = """
Output only the rewritten text for the back of a flashcard, without a heading,
quotes or any preamble. Keep the meaning of the original definition intact.
"""

CONTENT_INSTRUCTIONS: dict[str, str] = {
    "simplify": """
        Rewrite the given definition in plain, simple language that a beginner
        understands on first read. Avoid jargon; if a technical term is unavoidable,
        explain it in a few words.
        """,
    "explain": """
        Restate the given definition and follow it with a short explanation
        (2-3 sentences) of why it is true or how it works.
        """,
    "example": """
        Restate the given definition and add one short, concrete example that
        illustrates it.
        """,
    "mnemonic": """
        Restate the given definition and add a short, vivid memory aid
        (acronym, rhyme or image) that helps recall it.
        """,
    "summary": """
        Condense the given definition into a single clear sentence.
        """,
}

SUPPORTED_CONTENT_TYPES = frozenset(CONTENT_INSTRUCTIONS)


def get_card_content_agent(content_type: str) -> Agent[None, str]:
    """
    Build the agent for one content style.

    Raises:
        KeyError: If ``content_type`` has no instructions
    """
    return Agent(
        get_ai_model(),
        output_type=str,
        instructions=CONTENT_INSTRUCTIONS[content_type] + _COMMON_RULES,
    )
