"""StudyDeck: flashcard study service with activity streaks."""
