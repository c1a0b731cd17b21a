from .streak_tracker import StreakTracker

__all__ = ["StreakTracker"]
