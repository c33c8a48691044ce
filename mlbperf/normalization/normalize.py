"""Normalize raw feed records into Game and PlayerStats values."""

from typing import Dict, Iterable, List, Optional
import logging

from mlbperf.constants import STATUS_ALIASES
from mlbperf.normalization.ids import canonicalize_team_code, canonicalize_team_name
from mlbperf.normalization.parsing import (
    parse_innings_pitched,
    parse_optional_count,
    parse_optional_rate,
    parse_score,
)
from mlbperf.normalization.schema import validate_record, validate_table
from mlbperf.types import Game, GameStatus, PlayerStats

logger = logging.getLogger(__name__)


def _first(row: Dict, *keys: str):
    for key in keys:
        value = row.get(key)
        if value not in (None, ""):
            return value
    return None


def normalize_status(raw: Optional[str]) -> GameStatus:
    """Map a feed status string to GameStatus; unknown values are scheduled."""
    key = str(raw or "").strip().lower()
    if key.startswith("gamestatus."):
        key = key.split(".", 1)[1]
    status = STATUS_ALIASES.get(key)
    if status is None:
        if key:
            logger.debug("Unknown game status %r, treating as scheduled", raw)
        return GameStatus.SCHEDULED
    return GameStatus(status)


def game_from_dict(row: Dict, idx: int = 0) -> Game:
    """Build a Game from a camelCase or snake_case feed record."""
    validate_record("games", row, idx)
    status = normalize_status(_first(row, "status", "gameStatus", "game_status"))
    home_score = parse_score(_first(row, "homeScore", "home_score"))
    away_score = parse_score(_first(row, "awayScore", "away_score"))
    if status != GameStatus.COMPLETED:
        home_score = away_score = None
    return Game(
        home_team_code=canonicalize_team_code(_first(row, "homeTeamCode", "home_team_code")),
        away_team_code=canonicalize_team_code(_first(row, "awayTeamCode", "away_team_code")),
        date=str(_first(row, "date", "game_date")),
        status=status,
        home_score=home_score,
        away_score=away_score,
        home_team=canonicalize_team_name(_first(row, "homeTeam", "home_team")),
        away_team=canonicalize_team_name(_first(row, "awayTeam", "away_team")),
        time=_first(row, "time", "game_time"),
    )


def games_from_records(rows: Iterable[Dict]) -> List[Game]:
    rows = list(rows)
    validate_table("games", rows)
    return [game_from_dict(row, idx) for idx, row in enumerate(rows)]


def player_stats_from_dict(row: Dict) -> PlayerStats:
    """
    Build PlayerStats from a player record.

    Stats may be nested under "stats" or sent as flat fields next to the
    player's name; both shapes are accepted.
    """
    stats = row.get("stats") if isinstance(row.get("stats"), dict) else row
    innings = _first(stats, "inningsPitched", "innings_pitched", "ip")
    return PlayerStats(
        avg=parse_optional_rate(_first(stats, "avg", "battingAverage", "batting_average")),
        obp=parse_optional_rate(_first(stats, "obp")),
        slg=parse_optional_rate(_first(stats, "slg")),
        ops=parse_optional_rate(_first(stats, "ops")),
        home_runs=parse_optional_count(_first(stats, "homeRuns", "home_runs", "hr")),
        rbi=parse_optional_count(_first(stats, "rbi")),
        runs=parse_optional_count(_first(stats, "runs", "r")),
        hits=parse_optional_count(_first(stats, "hits", "h")),
        era=parse_optional_rate(_first(stats, "era")),
        whip=parse_optional_rate(_first(stats, "whip")),
        wins=parse_optional_count(_first(stats, "wins", "w")),
        losses=parse_optional_count(_first(stats, "losses", "l")),
        strikeouts=parse_optional_count(_first(stats, "strikeouts", "so", "k")),
        saves=parse_optional_count(_first(stats, "saves", "sv")),
        innings_pitched=parse_innings_pitched(innings) if innings is not None else None,
        earned_runs=parse_optional_count(_first(stats, "earnedRuns", "earned_runs", "er")),
    )


def roster_from_records(rows: Iterable[Dict]) -> List[PlayerStats]:
    rows = list(rows)
    validate_table("players", rows)
    return [player_stats_from_dict(row) for row in rows]

