import pytest

from conftest import EXPERT, make_entry
from scoreboard.stores.memory_store import MemoryScoreStore

pytestmark = pytest.mark.asyncio


async def test_query_returns_a_copy(memory_store):
    await memory_store.submit(EXPERT, make_entry(10))

    leaderboard = await memory_store.query(EXPERT, 10)
    leaderboard.clear()

    assert len(await memory_store.query(EXPERT, 10)) == 1


async def test_instances_do_not_share_state(memory_store):
    await memory_store.submit(EXPERT, make_entry(10))

    assert await MemoryScoreStore().query(EXPERT, 10) == []


async def test_custom_cap():
    small = MemoryScoreStore(max_entries=3)
    for score in [5, 4, 3, 2, 1]:
        await small.submit(EXPERT, make_entry(score))

    assert [e.score for e in await small.query(EXPERT, 10)] == [1, 2, 3]
    assert await small.ping() is True
