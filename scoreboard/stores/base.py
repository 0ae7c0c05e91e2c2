from abc import ABC, abstractmethod
from typing import List

from scoreboard.domain.leaderboard_rules import LeaderboardKey
from scoreboard.models.schema_models import ScoreEntrySchema


class BackingUnavailable(Exception):
    """Raised when the backing store cannot complete an operation."""


class RankedScoreStore(ABC):
    """Per-key collection of score entries, ascending by score, capped at MAX_ENTRIES.

    Ties on score keep submission order. Selection of the concrete store happens
    once at startup and stays fixed for the process lifetime.
    """

    name: str = "abstract"

    @abstractmethod
    async def submit(self, key: LeaderboardKey, entry: ScoreEntrySchema) -> None:
        """Insert the entry and evict everything ranked below MAX_ENTRIES.

        Args:
            key (LeaderboardKey): Leaderboard the entry belongs to
            entry (ScoreEntrySchema): Entry with id and timestamp already assigned

        Raises:
            BackingUnavailable: Neither the insert nor the eviction was applied
        """

    @abstractmethod
    async def query(self, key: LeaderboardKey, limit: int) -> List[ScoreEntrySchema]:
        """Return up to ``limit`` entries for the key, best score first.

        An unknown key returns an empty list.

        Raises:
            BackingUnavailable: The backing could not be read
        """

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass
