"""Leaderboard rules shared by the HTTP layer and the stores.

Nothing in here talks to Redis or FastAPI; ids and timestamps are made by
the caller so every function stays deterministic.
"""
