import logging
from typing import List

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from scoreboard.domain.leaderboard_rules import MAX_ENTRIES, LeaderboardKey, clamp_limit
from scoreboard.models.schema_models import ScoreEntrySchema
from scoreboard.stores.base import BackingUnavailable, RankedScoreStore


class RedisScoreStore(RankedScoreStore):
    """Leaderboards kept in Redis sorted sets.

    One sorted set per ``"{gameType}:{difficulty}"`` key. The member is the
    JSON-encoded entry and the sort score is the entry's score, so Redis keeps
    the set ascending and breaks ties by member bytes (the leading uuid7 id).
    """

    name = "redis"

    def __init__(self, redis: Redis, max_entries: int = MAX_ENTRIES):
        self.redis: Redis = redis
        self.max_entries = max_entries

    async def submit(self, key: LeaderboardKey, entry: ScoreEntrySchema) -> None:
        """Add the entry and trim the set in a single MULTI/EXEC transaction.

        Args:
            key (LeaderboardKey): Sorted set to write to
            entry (ScoreEntrySchema): Entry to store as a member

        Raises:
            BackingUnavailable: Redis refused or could not be reached
        """
        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                await (
                    pipe.zadd(str(key), {entry.to_member(): entry.score})
                    .zremrangebyrank(str(key), self.max_entries, -1)
                    .execute()
                )
        except RedisError as e:
            raise BackingUnavailable(f"Failed to submit score to {key}") from e

    async def query(self, key: LeaderboardKey, limit: int) -> List[ScoreEntrySchema]:
        """Read ranks [0, limit - 1] of the key's sorted set.

        Raises:
            BackingUnavailable: Redis could not be read or a member could not be decoded
        """
        limit = clamp_limit(limit)
        if limit == 0:
            # ZRANGE 0 -1 would return the whole set.
            return []
        try:
            members = await self.redis.zrange(str(key), 0, limit - 1)
        except RedisError as e:
            raise BackingUnavailable(f"Failed to read leaderboard {key}") from e

        try:
            return [ScoreEntrySchema.from_member(member) for member in members]
        except ValidationError as e:
            raise BackingUnavailable(f"Corrupt member in leaderboard {key}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except RedisError as e:
            logging.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        await self.redis.aclose()
