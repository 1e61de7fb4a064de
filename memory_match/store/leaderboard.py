from typing import List
from sortedcontainers import SortedKeyList

from .lock import ReadWriteLock
from ..models.data import ScoreEntry
from ..logger import get_logger

logger = get_logger(__name__)

DEFAULT_CAPACITY = 10

class LeaderboardStore:
    """Bounded ranking of score entries, best first.

    Entries are ordered by moves, then by time taken, both ascending.
    Anything ranked below ``capacity`` is dropped on insert.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError('Leaderboard capacity must be at least 1')
        self._capacity = capacity
        self._entries = SortedKeyList(key=lambda entry: entry.rank_key)
        self._lock = ReadWriteLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def submit(self, entry: ScoreEntry):
        """Insert an entry and truncate to capacity as one atomic step"""
        with self._lock.write_lock():
            self._entries.add(entry)
            while len(self._entries) > self._capacity:
                evicted = self._entries.pop()
                logger.debug(f"Evicted {evicted!r} from leaderboard")

    def snapshot(self) -> List[ScoreEntry]:
        """Return a copy of the current ranking"""
        with self._lock.read_lock():
            return list(self._entries)

    def __len__(self):
        with self._lock.read_lock():
            return len(self._entries)
