"""Unit tests for momentum calculations."""

import pytest

from mlbperf.features.momentum import (
    calculate_momentum,
    momentum_from_signs,
    momentum_series_values,
)


def _results(game_factory, outcomes):
    """Build oldest-first AAA games from a W/L string."""
    games = []
    for idx, outcome in enumerate(outcomes):
        home_score, away_score = (5, 1) if outcome == "W" else (1, 5)
        games.append(game_factory("AAA", "BBB", home_score, away_score, date=f"2024-08-{idx + 1:02d}"))
    return games


def test_loss_then_win_window_of_two(game_factory):
    games = _results(game_factory, "LW")
    assert calculate_momentum(games, "AAA") == pytest.approx(0.25)


def test_empty_window():
    assert calculate_momentum([], "AAA") == 0.0
    assert momentum_from_signs([]) == 0.0


def test_recent_games_weigh_more(game_factory):
    late_surge = calculate_momentum(_results(game_factory, "LLWW"), "AAA")
    early_surge = calculate_momentum(_results(game_factory, "WWLL"), "AAA")
    assert late_surge > 0 > early_surge


def test_window_normalized_extremes():
    # An all-win window of W games reaches (W + 1) / (2W).
    assert momentum_from_signs([1] * 10) == pytest.approx(0.55)
    assert momentum_from_signs([-1] * 10) == pytest.approx(-0.55)
    assert momentum_from_signs([1]) == 1.0


def test_weight_normalized_extremes():
    assert momentum_from_signs([1] * 10, normalize="weights") == 1.0
    assert momentum_from_signs([-1] * 7, normalize="weights") == -1.0


def test_invalid_normalize_mode():
    with pytest.raises(ValueError):
        momentum_from_signs([1], normalize="bogus")


@pytest.mark.parametrize("outcomes", ["W", "L", "WLWLWLWLWL", "LLLLLLLLLLWW", "WWWWWWWWWWWWWW"])
def test_momentum_bounded(game_factory, outcomes):
    games = _results(game_factory, outcomes)
    for window in (None, 1, 3, 10):
        assert -1.0 <= calculate_momentum(games, "AAA", window=window) <= 1.0


def test_window_trims_to_most_recent(game_factory):
    games = _results(game_factory, "LLLLW")
    assert calculate_momentum(games, "AAA", window=1) == 1.0
    assert calculate_momentum(games, "AAA", window=0) == 0.0


def test_ties_count_as_losses(game_factory):
    games = [game_factory("AAA", "BBB", 3, 3)]
    assert calculate_momentum(games, "AAA") == -1.0


def test_away_perspective(game_factory):
    games = [game_factory("BBB", "AAA", 1, 4)]
    assert calculate_momentum(games, "AAA") == 1.0
    assert calculate_momentum(games, "BBB") == -1.0


def test_series_uses_growing_then_trailing_window(game_factory):
    games = _results(game_factory, "LWWL")
    values = momentum_series_values(games, "AAA", window=2)
    assert values == pytest.approx([-1.0, 0.25, 0.75, -0.25])
