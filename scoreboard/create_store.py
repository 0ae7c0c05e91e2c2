import logging

from redis.asyncio import Redis

from scoreboard.stores.base import RankedScoreStore
from scoreboard.stores.memory_store import MemoryScoreStore
from scoreboard.stores.redis_store import RedisScoreStore


def create_store(redis_url: str | None, app_env: str) -> RankedScoreStore:
    """Pick the leaderboard backing for this process.

    Args:
        redis_url (str | None): Connection URL of the durable backing, if any
        app_env (str): "development" allows running without Redis

    Raises:
        RuntimeError: No Redis URL outside of development

    Returns:
        RankedScoreStore: Store used for the whole process lifetime
    """
    if redis_url:
        redis = Redis.from_url(redis_url, decode_responses=True, health_check_interval=30)
        logging.info("Using Redis leaderboard store")
        return RedisScoreStore(redis)

    if app_env == "development":
        logging.warning("REDIS_URL is not set, using in-memory leaderboard store")
        return MemoryScoreStore()

    raise RuntimeError(f"REDIS_URL must be set when APP_ENV is {app_env!r}")
