from .card_content import CardContent, CardContentResolver, Fallback, Generated, Verbatim

__all__ = [
    "CardContent",
    "CardContentResolver",
    "Fallback",
    "Generated",
    "Verbatim",
]
