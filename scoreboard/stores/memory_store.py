"""In-memory leaderboard for local development. State is lost on restart."""

from typing import Dict, List

from scoreboard.domain.leaderboard_rules import MAX_ENTRIES, LeaderboardKey, clamp_limit
from scoreboard.models.schema_models import ScoreEntrySchema
from scoreboard.stores.base import RankedScoreStore


class MemoryScoreStore(RankedScoreStore):
    name = "memory"

    def __init__(self, max_entries: int = MAX_ENTRIES):
        self.max_entries = max_entries
        self._leaderboards: Dict[str, List[ScoreEntrySchema]] = {}

    async def submit(self, key: LeaderboardKey, entry: ScoreEntrySchema) -> None:
        # No await in here, so a submit cannot interleave with another one.
        entries = self._leaderboards.get(str(key), [])
        entries = sorted(entries + [entry], key=lambda e: (e.score, e.id))
        self._leaderboards[str(key)] = entries[: self.max_entries]

    async def query(self, key: LeaderboardKey, limit: int) -> List[ScoreEntrySchema]:
        limit = clamp_limit(limit)
        return list(self._leaderboards.get(str(key), [])[:limit])
