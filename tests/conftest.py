"""
Pytest configuration and shared fixtures for mlbperf tests.
"""

import pytest

from mlbperf.types import Game, GameStatus, PlayerStats


def make_game(home, away, home_score=None, away_score=None, date="2024-04-01",
              status=GameStatus.COMPLETED):
    """Build a Game; scores default to missing."""
    return Game(
        home_team_code=home,
        away_team_code=away,
        date=date,
        status=status,
        home_score=home_score,
        away_score=away_score,
    )


@pytest.fixture
def game_factory():
    return make_game


@pytest.fixture
def aaa_home_games():
    """AAA: beat BBB 5-3, lost to CCC 2-6, beat DDD 7-1, all at home."""
    return [
        make_game("AAA", "BBB", 5, 3, date="2024-04-01"),
        make_game("AAA", "CCC", 2, 6, date="2024-04-02"),
        make_game("AAA", "DDD", 7, 1, date="2024-04-03"),
    ]


@pytest.fixture
def mixed_games():
    """Unsorted AAA games with home/away roles, noise and incomplete records."""
    return [
        make_game("BBB", "AAA", 4, 6, date="2024-05-03"),   # away win
        make_game("AAA", "CCC", 1, 3, date="2024-05-01"),   # home loss
        make_game("aaa", "DDD", 8, 2, date="2024-05-02"),   # home win, lowercase code
        make_game("EEE", "AAA", 9, 0, date="2024-05-05"),   # away loss
        make_game("AAA", "BBB", date="2024-05-06", status=GameStatus.SCHEDULED),
        make_game("AAA", "CCC", date="2024-05-04", status=GameStatus.LIVE),
        make_game("AAA", "DDD", 3, None, date="2024-05-04"),  # missing score
        make_game("BBB", "CCC", 5, 4, date="2024-05-02"),   # other teams
    ]


@pytest.fixture
def sample_roster():
    return [
        PlayerStats(avg=0.300),
        PlayerStats(avg=0.250),
        PlayerStats(avg=0.200, era=0.0),
        PlayerStats(era=3.00, innings_pitched=120.0),
        PlayerStats(era=5.00, innings_pitched=80.1),
    ]
