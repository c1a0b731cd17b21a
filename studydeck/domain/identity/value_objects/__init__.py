from .activity_streak import ActivityStreak

__all__ = ["ActivityStreak"]
