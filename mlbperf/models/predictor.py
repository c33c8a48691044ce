"""Explainable heuristic prediction of a game between two teams."""

from typing import List, Optional
import logging
import math

from mlbperf.config import Config
from mlbperf.constants import HOME_FIELD_FACTOR
from mlbperf.types import GamePrediction, TeamPerformanceMetrics

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def offense_vs_pitching(
    batting_average: float,
    opponent_era: float,
    era_factor: float = 0.1,
) -> float:
    return batting_average - opponent_era * era_factor


def home_win_probability(
    home: TeamPerformanceMetrics,
    away: TeamPerformanceMetrics,
    config: Optional[Config] = None,
) -> float:
    """
    Blend record, run differential, momentum and the batting/pitching
    matchup on top of the home-field base rate, clamped to the configured
    probability bounds.
    """
    config = config or Config()
    probability = config.home_field_advantage
    probability += (home.win_percentage - away.win_percentage) * config.win_pct_weight
    probability += (home.run_differential - away.run_differential) * config.run_diff_weight
    probability += (home.momentum - away.momentum) * config.momentum_weight

    home_offense = offense_vs_pitching(
        home.team_batting_average, away.team_era, config.era_matchup_factor
    )
    away_offense = offense_vs_pitching(
        away.team_batting_average, home.team_era, config.era_matchup_factor
    )
    probability += (home_offense - away_offense) * config.matchup_weight
    return _clamp(probability, config.min_probability, config.max_probability)


def predict_score(
    average_runs_scored: float,
    opponent_era: float,
    config: Optional[Config] = None,
) -> int:
    """Team's scoring average scaled by how far the opposing ERA sits from league average."""
    config = config or Config()
    adjusted = average_runs_scored * (
        1.0 + (config.league_average_era - opponent_era) * config.era_score_factor
    )
    return _round_half_up(_clamp(adjusted, 0, config.max_predicted_score))


def calculate_confidence(
    home: TeamPerformanceMetrics,
    away: TeamPerformanceMetrics,
    config: Optional[Config] = None,
) -> float:
    """Larger samples and wider record gaps both raise confidence."""
    config = config or Config()
    games_sample = min(home.total_games, away.total_games)
    performance_gap = abs(home.win_percentage - away.win_percentage)
    divisor = config.confidence_games_divisor or 1.0
    return _clamp(
        games_sample / divisor + performance_gap,
        config.min_confidence,
        config.max_confidence,
    )


def identify_key_factors(
    home: TeamPerformanceMetrics,
    away: TeamPerformanceMetrics,
    home_label: Optional[str] = None,
    away_label: Optional[str] = None,
    config: Optional[Config] = None,
) -> List[str]:
    config = config or Config()
    home_name = home_label or home.team_code or "Home team"
    away_name = away_label or away.team_code or "Away team"
    factors = []

    if home.win_percentage > away.win_percentage + config.record_gap_threshold:
        factors.append(f"{home_name} has superior record")
    elif away.win_percentage > home.win_percentage + config.record_gap_threshold:
        factors.append(f"{away_name} has superior record")

    if home.momentum > config.hot_momentum_threshold:
        factors.append(f"{home_name} is hot")
    elif away.momentum > config.hot_momentum_threshold:
        factors.append(f"{away_name} is hot")

    if home.run_differential > away.run_differential + config.run_diff_gap_threshold:
        factors.append(f"{home_name} has better run differential")
    elif away.run_differential > home.run_differential + config.run_diff_gap_threshold:
        factors.append(f"{away_name} has better run differential")

    factors.append(HOME_FIELD_FACTOR)
    return factors


def predict_game(
    home: TeamPerformanceMetrics,
    away: TeamPerformanceMetrics,
    config: Optional[Config] = None,
    home_label: Optional[str] = None,
    away_label: Optional[str] = None,
) -> GamePrediction:
    """
    Predict an upcoming game from both teams' metrics.

    Args:
        home: Home team metrics, including roster batting average and ERA
        away: Away team metrics
        config: Weights and bounds (defaults when omitted)
        home_label: Display name used in key factors (defaults to team code)
        away_label: Display name used in key factors

    Returns:
        GamePrediction whose two probabilities sum to exactly 1.0
    """
    config = config or Config()
    home_probability = home_win_probability(home, away, config)
    prediction = GamePrediction(
        home_win_probability=home_probability,
        away_win_probability=1.0 - home_probability,
        predicted_home_score=predict_score(home.average_runs_scored, away.team_era, config),
        predicted_away_score=predict_score(away.average_runs_scored, home.team_era, config),
        confidence=calculate_confidence(home, away, config),
        key_factors=identify_key_factors(home, away, home_label, away_label, config),
    )
    logger.debug(
        "Predicted %s vs %s: home_win=%.3f confidence=%.2f",
        home.team_code,
        away.team_code,
        prediction.home_win_probability,
        prediction.confidence,
    )
    return prediction
