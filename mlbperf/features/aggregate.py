"""Reduce a team's games and roster into summary performance metrics."""

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence
import logging

from mlbperf.config import Config
from mlbperf.features.momentum import calculate_momentum
from mlbperf.features.rates import earned_run_average, winning_percentage
from mlbperf.normalization.ids import canonicalize_team_code
from mlbperf.normalization.parsing import parse_game_date
from mlbperf.types import Game, GameStatus, PlayerStats, TeamPerformanceMetrics

logger = logging.getLogger(__name__)


def _date_sort_key(game: Game):
    parsed = parse_game_date(game.date)
    # Unparseable dates sort after every real date.
    return (parsed is None, parsed or date.min)


def sort_games_by_date(games: Iterable[Game]) -> List[Game]:
    """Return a new list ordered oldest first; ties keep their input order."""
    return sorted(games, key=_date_sort_key)


def team_games(games: Iterable[Game], team_code: str) -> List[Game]:
    return [game for game in games if game.involves(team_code)]


def completed_team_games(games: Iterable[Game], team_code: str) -> List[Game]:
    """
    The team's completed games with both scores present, oldest first.

    Completed games missing a score are dropped rather than scored as zero.
    """
    qualifying = []
    skipped = 0
    for game in team_games(games, team_code):
        if game.is_final:
            qualifying.append(game)
        elif game.status == GameStatus.COMPLETED:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d completed games without scores for %s", skipped, team_code)
    return sort_games_by_date(qualifying)


def aggregate_team_stats(games: Iterable[Game], team_code: str) -> Dict[str, float]:
    """
    Win/loss counts and run averages over the team's qualifying games.

    Returns a dict with wins, losses, total_games, win_percentage,
    average_runs_scored, average_runs_allowed and run_differential.
    Every rate is 0.0 when there are no qualifying games.
    """
    wins = 0
    total_games = 0
    runs_scored = 0
    runs_allowed = 0
    for game in completed_team_games(games, team_code):
        team_score, opponent_score = game.scores_for(team_code)
        total_games += 1
        runs_scored += team_score
        runs_allowed += opponent_score
        if team_score > opponent_score:
            wins += 1

    win_percentage = winning_percentage(wins, total_games - wins)
    average_runs_scored = runs_scored / total_games if total_games > 0 else 0.0
    average_runs_allowed = runs_allowed / total_games if total_games > 0 else 0.0
    return {
        "wins": wins,
        "losses": total_games - wins,
        "total_games": total_games,
        "win_percentage": win_percentage,
        "average_runs_scored": average_runs_scored,
        "average_runs_allowed": average_runs_allowed,
        "run_differential": average_runs_scored - average_runs_allowed,
    }


def team_batting_average(roster: Optional[Sequence[PlayerStats]]) -> float:
    values = [player.avg for player in roster or [] if player.avg is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)


def _pitcher_era(player: PlayerStats) -> Optional[float]:
    if player.era is not None and player.era > 0:
        return player.era
    if player.earned_runs is not None and player.innings_pitched:
        return earned_run_average(player.earned_runs, player.innings_pitched)
    return None


def team_era(roster: Optional[Sequence[PlayerStats]]) -> float:
    """
    Mean ERA over players who have pitched.

    A reported ERA of zero marks a position player unless earned runs and
    innings are present, in which case ERA is recomputed from them.
    """
    values = [era for era in (_pitcher_era(player) for player in roster or []) if era is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)


def form_string(games: Sequence[Game], team_code: str, length: int = 5) -> str:
    """W/L letters for the last `length` qualifying games, oldest first."""
    if length <= 0:
        return ""
    letters = []
    for game in completed_team_games(games, team_code)[-length:]:
        team_score, opponent_score = game.scores_for(team_code)
        letters.append("W" if team_score > opponent_score else "L")
    return "".join(letters)


def calculate_team_performance(
    team_code: str,
    games: Iterable[Game],
    roster: Optional[Sequence[PlayerStats]] = None,
    config: Optional[Config] = None,
) -> TeamPerformanceMetrics:
    """Build the full TeamPerformanceMetrics for one team."""
    config = config or Config()
    code = canonicalize_team_code(team_code)
    completed = completed_team_games(games, code)
    batting_average = team_batting_average(roster)
    era = team_era(roster)

    if not completed:
        logger.debug("No completed games for %s", code)
        return TeamPerformanceMetrics(
            team_code=code,
            team_batting_average=batting_average,
            team_era=era,
        )

    stats = aggregate_team_stats(completed, code)
    window = completed[-config.momentum_window:] if config.momentum_window > 0 else []
    return TeamPerformanceMetrics(
        team_code=code,
        win_percentage=stats["win_percentage"],
        average_runs_scored=stats["average_runs_scored"],
        average_runs_allowed=stats["average_runs_allowed"],
        run_differential=stats["run_differential"],
        total_games=stats["total_games"],
        wins=stats["wins"],
        losses=stats["losses"],
        momentum=calculate_momentum(window, code),
        form=form_string(completed, code, config.form_length),
        team_batting_average=batting_average,
        team_era=era,
    )
