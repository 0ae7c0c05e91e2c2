from datetime import datetime, timezone
from uuid import UUID

import fakeredis
import pytest
from fastapi.testclient import TestClient
from uuid6 import uuid7

from scoreboard.domain.leaderboard_rules import LeaderboardKey
from scoreboard.main import create_app
from scoreboard.models.schema_models import GameConfigSchema, ScoreEntrySchema
from scoreboard.stores.memory_store import MemoryScoreStore
from scoreboard.stores.redis_store import RedisScoreStore

EXPERT = LeaderboardKey("minesweeper", "expert")
BEGINNER = LeaderboardKey("minesweeper", "beginner")


def make_entry(
    score,
    player_name: str = "Ann",
    key: LeaderboardKey = EXPERT,
    entry_id: UUID | None = None,
) -> ScoreEntrySchema:
    return ScoreEntrySchema(
        id=entry_id or uuid7(),
        game_type=key.game_type,
        difficulty=key.difficulty,
        score=score,
        player_name=player_name,
        timestamp=datetime.now(timezone.utc),
        game_config=GameConfigSchema(board_width=30, board_height=16, mines_count=99),
    )


@pytest.fixture()
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture()
def redis_store(fake_server):
    return RedisScoreStore(fakeredis.FakeAsyncRedis(server=fake_server, decode_responses=True))


@pytest.fixture()
def memory_store():
    return MemoryScoreStore()


@pytest.fixture(params=["memory", "redis"])
def store(request):
    """Run a test once per backing."""
    if request.param == "memory":
        return MemoryScoreStore()
    return RedisScoreStore(
        fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
    )


@pytest.fixture()
def client(memory_store):
    with TestClient(create_app(memory_store)) as test_client:
        yield test_client
