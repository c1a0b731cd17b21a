"""
Domain layer.

Core business rules of StudyDeck, free of framework and infrastructure imports:
- Entities: users, flashcard sets and flashcards
- Value Objects: identifiers and the activity streak
"""
