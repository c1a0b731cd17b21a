"""
Learning bounded context - Application layer.

Contains use cases for flashcard sets and cards:
- Set synchronization (create/update with per-card content generation)
- Set queries and maintenance
- Card review status and study statistics
"""
