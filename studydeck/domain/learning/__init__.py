"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Flashcard sets owned by a user
- Flashcards with a review status
"""
