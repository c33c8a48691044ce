"""
Baseball rate statistics.

Provides:
- Batting rates (AVG, OBP, SLG, OPS, ISO, BABIP, wOBA, OPS+)
- Pitching rates (ERA, WHIP, K/9, BB/9, K/BB, FIP, ERA+)
- Standings math (winning percentage, games back)

Every function returns 0.0 when its denominator is zero.
"""

import math
from typing import Dict, Optional

from mlbperf.constants import FIP_CONSTANT, WOBA_WEIGHTS


def _safe_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


# =============================================================================
# BATTING
# =============================================================================

def batting_average(hits: int, at_bats: int) -> float:
    return _safe_div(hits, at_bats)


def on_base_percentage(hits: int, walks: int, hit_by_pitch: int, plate_appearances: int) -> float:
    return _safe_div(hits + walks + hit_by_pitch, plate_appearances)


def slugging_percentage(total_bases_value: int, at_bats: int) -> float:
    return _safe_div(total_bases_value, at_bats)


def on_base_plus_slugging(obp: float, slg: float) -> float:
    return obp + slg


def total_bases(singles: int, doubles: int, triples: int, home_runs: int) -> int:
    return singles + (doubles * 2) + (triples * 3) + (home_runs * 4)


def isolated_power(slg: float, avg: float) -> float:
    """ISO = SLG - AVG."""
    return slg - avg


def babip(hits: int, home_runs: int, at_bats: int, strikeouts: int, sacrifice_flies: int) -> float:
    """
    Batting average on balls in play.

    BABIP = (H - HR) / (AB - K - HR + SF)
    """
    return _safe_div(hits - home_runs, at_bats - strikeouts - home_runs + sacrifice_flies)


def woba(
    walks: int,
    hit_by_pitch: int,
    singles: int,
    doubles: int,
    triples: int,
    home_runs: int,
    at_bats: int,
    sacrifice_flies: int,
    weights: Optional[Dict[str, float]] = None,
) -> float:
    """Weighted on-base average over plate appearances (AB + BB + HBP + SF)."""
    w = dict(WOBA_WEIGHTS)
    if weights:
        w.update(weights)
    plate_appearances = at_bats + walks + hit_by_pitch + sacrifice_flies
    numerator = (
        w["walk"] * walks
        + w["hbp"] * hit_by_pitch
        + w["single"] * singles
        + w["double"] * doubles
        + w["triple"] * triples
        + w["home_run"] * home_runs
    )
    return _safe_div(numerator, plate_appearances)


def ops_plus(obp: float, slg: float, league_obp: float, league_slg: float, park_factor: float = 1.0) -> float:
    """OPS+ = 100 * (OBP / lgOBP + SLG / lgSLG - 1), scaled by park factor."""
    if league_obp == 0 or league_slg == 0 or park_factor == 0:
        return 0.0
    return 100 * ((obp / league_obp) + (slg / league_slg) - 1) / park_factor


# =============================================================================
# PITCHING
# =============================================================================

def earned_run_average(earned_runs: int, innings_pitched: float) -> float:
    """Earned runs allowed per nine innings."""
    return _safe_div(earned_runs * 9, innings_pitched)


def whip(walks: int, hits: int, innings_pitched: float) -> float:
    return _safe_div(walks + hits, innings_pitched)


def strikeouts_per_nine(strikeouts: int, innings_pitched: float) -> float:
    return _safe_div(strikeouts * 9, innings_pitched)


def walks_per_nine(walks: int, innings_pitched: float) -> float:
    return _safe_div(walks * 9, innings_pitched)


def strikeout_walk_ratio(strikeouts: int, walks: int) -> float:
    return _safe_div(strikeouts, walks)


def fip(
    home_runs: int,
    walks: int,
    hit_by_pitch: int,
    strikeouts: int,
    innings_pitched: float,
    constant: float = FIP_CONSTANT,
) -> float:
    """
    Fielding independent pitching.

    FIP = (13*HR + 3*(BB + HBP) - 2*K) / IP + constant
    """
    if innings_pitched == 0:
        return 0.0
    numerator = (13 * home_runs) + (3 * (walks + hit_by_pitch)) - (2 * strikeouts)
    return numerator / innings_pitched + constant


def era_plus(era: float, league_era: float, park_factor: float = 1.0) -> float:
    """ERA+ = 100 * lgERA / ERA, scaled by park factor."""
    if era == 0 or park_factor == 0:
        return 0.0
    return 100 * (league_era / era) / park_factor


def format_innings_pitched(innings: Optional[float]) -> str:
    """Render true innings in baseball notation (7.333 -> "7.1")."""
    if innings is None:
        return "0.0"
    full = math.floor(innings)
    fraction = innings - full
    if fraction >= 0.8:
        return f"{full + 1}.0"
    if fraction >= 0.4:
        return f"{full}.2"
    if fraction > 0:
        return f"{full}.1"
    return f"{full}.0"


# =============================================================================
# STANDINGS
# =============================================================================

def winning_percentage(wins: Optional[int], losses: Optional[int]) -> float:
    if wins is None or losses is None:
        return 0.0
    return _safe_div(wins, wins + losses)


def games_back(leader_wins: int, leader_losses: int, team_wins: int, team_losses: int) -> float:
    return ((leader_wins - team_wins) + (team_losses - leader_losses)) / 2
