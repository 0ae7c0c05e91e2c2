"""Leaderboard rules that are independent from HTTP and Redis.

Rule of thumb:
- OK: limits, validation, name normalization, key serialization.
- Not OK: touching Redis, FastAPI, datetime.now(), etc.
"""

import math
import re
from dataclasses import dataclass

MAX_ENTRIES = 100
DEFAULT_LIMIT = 50
LEADING_INT = re.compile(r"\s*([+-]?\d{1,10})")

MIN_SCORE = 0
MAX_SCORE = 999

MAX_PLAYER_NAME_LENGTH = 20
ANONYMOUS_PLAYER_NAME = "Anonymous"


class InvalidSubmission(ValueError):
    """Raised when a submission passes type checks but breaks a leaderboard rule."""


@dataclass(frozen=True)
class LeaderboardKey:
    game_type: str
    difficulty: str

    def __str__(self) -> str:
        return f"{self.game_type}:{self.difficulty}"


def validate_score(score: float) -> float:
    """Return the score if it is finite and inside [MIN_SCORE, MAX_SCORE].

    Raises:
        InvalidSubmission: The score is out of range or not finite
    """
    # Range first: ints too large for a float make math.isfinite overflow.
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidSubmission("Invalid score range")
    if isinstance(score, float) and not math.isfinite(score):
        raise InvalidSubmission("Invalid score range")
    return score


def normalize_player_name(player_name: str | None) -> str:
    """Trim the display name, default it to "Anonymous" and cut it to 20 characters."""
    name = (player_name or "").strip() or ANONYMOUS_PLAYER_NAME
    return name[:MAX_PLAYER_NAME_LENGTH]


def parse_limit(raw_limit: str | None) -> int:
    """Parse the ``limit`` query parameter.

    Only the leading integer counts ("5abc" is 5). Missing, non-numeric and
    non-positive values fall back to DEFAULT_LIMIT, anything above MAX_ENTRIES
    is capped.
    """
    match = LEADING_INT.match(raw_limit) if raw_limit is not None else None
    limit = int(match.group(1)) if match else DEFAULT_LIMIT
    if limit <= 0:
        limit = DEFAULT_LIMIT
    return min(limit, MAX_ENTRIES)


def clamp_limit(limit: int) -> int:
    """Clamp a read size into [0, MAX_ENTRIES]."""
    return max(0, min(int(limit), MAX_ENTRIES))
