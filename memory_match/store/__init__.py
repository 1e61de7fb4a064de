from .leaderboard import LeaderboardStore, DEFAULT_CAPACITY

__all__ = ['LeaderboardStore', 'DEFAULT_CAPACITY']
