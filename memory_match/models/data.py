import math
from datetime import datetime, timezone
from typing import Optional

class ScoreEntry:
    __slots__ = ('player_name', 'moves', 'time_taken', 'timestamp')
    def __init__(self, player_name: str, moves: int, time_taken: float, timestamp: Optional[datetime] = None):
        if moves < 0:
            raise ValueError('moves must be non-negative')
        if not math.isfinite(time_taken) or time_taken < 0:
            raise ValueError('time taken must be a finite non-negative number')
        self.player_name = player_name
        self.moves = int(moves)
        self.time_taken = float(time_taken)
        self.timestamp = timestamp if timestamp is not None else datetime.now(timezone.utc)

    @classmethod
    def from_dict(cls, data: dict) -> 'ScoreEntry':
        """Build an entry from a decoded submission, stamping it with the server clock.

        Any ``timestamp`` carried in ``data`` is ignored.
        """
        return cls(
            player_name=data['playerName'],
            moves=data['moves'],
            time_taken=data['timeTaken'],
        )

    @property
    def rank_key(self):
        return (self.moves, self.time_taken)

    def to_dict(self):
        return {
            'playerName': self.player_name,
            'moves': self.moves,
            'timeTaken': self.time_taken,
            'timestamp': self.timestamp
        }

    def __repr__(self):
        return f"ScoreEntry({self.player_name!r}, moves={self.moves}, time_taken={self.time_taken})"
