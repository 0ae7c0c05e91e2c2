"""Leaderboard stores.

- RankedScoreStore is the contract the HTTP layer talks to.
- RedisScoreStore is the durable backing, MemoryScoreStore the local one.
- Pick one with scoreboard.create_store.create_store at startup.
"""
