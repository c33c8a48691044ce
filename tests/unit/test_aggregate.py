"""Unit tests for the statistics aggregator."""

import pytest

from mlbperf.config import Config
from mlbperf.features.aggregate import (
    aggregate_team_stats,
    calculate_team_performance,
    completed_team_games,
    form_string,
    team_batting_average,
    team_era,
)
from mlbperf.types import GameStatus, PlayerStats, TeamPerformanceMetrics


def test_three_game_home_scenario(aaa_home_games):
    stats = aggregate_team_stats(aaa_home_games, "AAA")
    assert stats["wins"] == 2
    assert stats["losses"] == 1
    assert stats["total_games"] == 3
    assert stats["win_percentage"] == pytest.approx(0.667, abs=1e-3)
    assert stats["average_runs_scored"] == pytest.approx(4.667, abs=1e-3)
    assert stats["average_runs_allowed"] == pytest.approx(3.333, abs=1e-3)
    assert stats["run_differential"] == pytest.approx(1.333, abs=1e-3)


def test_home_and_away_roles_and_exclusions(mixed_games):
    stats = aggregate_team_stats(mixed_games, "AAA")
    assert stats["total_games"] == 4
    assert stats["wins"] == 2
    assert stats["win_percentage"] == 0.5
    assert stats["average_runs_scored"] == pytest.approx(15 / 4)
    assert stats["average_runs_allowed"] == pytest.approx(18 / 4)
    assert stats["run_differential"] == pytest.approx(-0.75)


def test_team_code_is_case_insensitive(mixed_games):
    assert aggregate_team_stats(mixed_games, "aaa") == aggregate_team_stats(mixed_games, "AAA")


def test_missing_scores_are_not_zeros(game_factory):
    games = [
        game_factory("AAA", "BBB", 4, 2),
        game_factory("AAA", "BBB", None, 3),
        game_factory("AAA", "BBB", 5, None),
    ]
    stats = aggregate_team_stats(games, "AAA")
    assert stats["total_games"] == 1
    assert stats["average_runs_scored"] == 4.0


def test_no_games_returns_zeros():
    stats = aggregate_team_stats([], "AAA")
    assert stats["total_games"] == 0
    assert stats["win_percentage"] == 0.0
    assert stats["average_runs_scored"] == 0.0
    assert stats["average_runs_allowed"] == 0.0
    assert stats["run_differential"] == 0.0


def test_completed_team_games_sorted_copy(mixed_games):
    original = list(mixed_games)
    ordered = completed_team_games(mixed_games, "AAA")
    assert [game.date for game in ordered] == [
        "2024-05-01", "2024-05-02", "2024-05-03", "2024-05-05",
    ]
    assert mixed_games == original


def test_unparseable_dates_sort_last(game_factory):
    games = [
        game_factory("AAA", "BBB", 1, 0, date="sometime"),
        game_factory("AAA", "BBB", 2, 0, date="2024-06-02"),
        game_factory("AAA", "BBB", 3, 0, date="2024-06-01"),
    ]
    ordered = completed_team_games(games, "AAA")
    assert [game.home_score for game in ordered] == [3, 2, 1]


def test_form_string_oldest_first(mixed_games):
    assert form_string(mixed_games, "AAA", length=5) == "LWWL"
    assert form_string(mixed_games, "AAA", length=2) == "WL"
    assert form_string(mixed_games, "AAA", length=0) == ""


def test_roster_aggregates(sample_roster):
    assert team_batting_average(sample_roster) == pytest.approx(0.25)
    assert team_era(sample_roster) == pytest.approx(4.0)
    assert team_batting_average([]) == 0.0
    assert team_era(None) == 0.0


def test_team_era_falls_back_to_earned_runs():
    roster = [
        PlayerStats(era=3.00),
        PlayerStats(earned_runs=30, innings_pitched=54.0),   # 5.00
        PlayerStats(era=0.0, earned_runs=0, innings_pitched=9.0),
        PlayerStats(era=0.0),
        PlayerStats(earned_runs=4, innings_pitched=0.0),
    ]
    assert team_era(roster) == pytest.approx((3.0 + 5.0 + 0.0) / 3)


def test_calculate_team_performance(mixed_games, sample_roster):
    metrics = calculate_team_performance("aaa", mixed_games, sample_roster)
    assert metrics.team_code == "AAA"
    assert metrics.total_games == 4
    assert metrics.wins == 2
    assert metrics.losses == 2
    assert metrics.form == "LWWL"
    assert metrics.momentum == pytest.approx(0.0)
    assert metrics.team_batting_average == pytest.approx(0.25)
    assert metrics.team_era == pytest.approx(4.0)
    assert 0.0 <= metrics.win_percentage <= 1.0


def test_momentum_uses_most_recent_window(game_factory):
    games = [game_factory("AAA", "BBB", 0, 1, date=f"2024-07-{day:02d}") for day in range(1, 6)]
    games.append(game_factory("AAA", "BBB", 5, 1, date="2024-07-10"))
    metrics = calculate_team_performance("AAA", games, config=Config(momentum_window=1))
    assert metrics.momentum == 1.0


def test_calculate_team_performance_without_games(sample_roster):
    assert calculate_team_performance("AAA", []) == TeamPerformanceMetrics.empty("AAA")
    metrics = calculate_team_performance("AAA", [], sample_roster)
    assert metrics.total_games == 0
    assert metrics.momentum == 0.0
    assert metrics.team_era == pytest.approx(4.0)


def test_aggregation_is_idempotent(mixed_games, sample_roster):
    first = calculate_team_performance("AAA", mixed_games, sample_roster)
    second = calculate_team_performance("AAA", mixed_games, sample_roster)
    assert first == second


def test_non_completed_games_ignored(game_factory):
    games = [game_factory("AAA", "BBB", 3, 1, status=GameStatus.LIVE)]
    assert calculate_team_performance("AAA", games).total_games == 0


def test_players_without_stats_do_not_count():
    roster = [PlayerStats(), PlayerStats(avg=0.280)]
    assert team_batting_average(roster) == pytest.approx(0.280)
