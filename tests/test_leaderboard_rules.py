import math

import pytest

from scoreboard.domain.leaderboard_rules import (
    ANONYMOUS_PLAYER_NAME,
    DEFAULT_LIMIT,
    MAX_ENTRIES,
    InvalidSubmission,
    LeaderboardKey,
    clamp_limit,
    normalize_player_name,
    parse_limit,
    validate_score,
)


def test_key_serializes_as_game_and_difficulty():
    assert str(LeaderboardKey("minesweeper", "expert")) == "minesweeper:expert"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_player_name_becomes_anonymous(name):
    assert normalize_player_name(name) == ANONYMOUS_PLAYER_NAME


def test_player_name_is_trimmed_and_truncated():
    assert normalize_player_name("  Bo  ") == "Bo"
    long_name = "abcdefghijklmnopqrstuvwxy"
    assert len(long_name) == 25
    assert normalize_player_name(long_name) == "abcdefghijklmnopqrst"


@pytest.mark.parametrize("score", [0, 0.5, 45, 999])
def test_score_in_range_is_accepted(score):
    assert validate_score(score) == score


@pytest.mark.parametrize("score", [-1, 999.01, 1500, 10**400, -(10**400), math.inf, math.nan])
def test_score_out_of_range_is_rejected(score):
    with pytest.raises(InvalidSubmission):
        validate_score(score)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, DEFAULT_LIMIT),
        ("10", 10),
        ("100", MAX_ENTRIES),
        ("1000", MAX_ENTRIES),
        ("abc", DEFAULT_LIMIT),
        ("5abc", 5),
        (" 7", 7),
        ("9" * 5000, MAX_ENTRIES),
        ("0", DEFAULT_LIMIT),
        ("-5", DEFAULT_LIMIT),
    ],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


def test_clamp_limit():
    assert clamp_limit(-3) == 0
    assert clamp_limit(7) == 7
    assert clamp_limit(500) == MAX_ENTRIES
