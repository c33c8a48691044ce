"""Value types shared across the analytics modules."""

from dataclasses import dataclass, field, asdict
from datetime import date as Date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from mlbperf import constants
from mlbperf.normalization.ids import canonicalize_team_code, same_team


class GameStatus(str, Enum):
    SCHEDULED = constants.STATUS_SCHEDULED
    LIVE = constants.STATUS_LIVE
    COMPLETED = constants.STATUS_COMPLETED


class ChartType(str, Enum):
    WIN_LOSS = constants.CHART_WIN_LOSS
    RUNS_SCORED = constants.CHART_RUNS_SCORED
    RUNS_ALLOWED = constants.CHART_RUNS_ALLOWED
    RUN_DIFFERENTIAL = constants.CHART_RUN_DIFFERENTIAL
    MOMENTUM = constants.CHART_MOMENTUM


@dataclass(frozen=True)
class Game:
    """
    A single game between two teams.

    Scores are only meaningful once the game is completed; a completed
    game missing either score is excluded from every derived metric.
    """
    home_team_code: str
    away_team_code: str
    date: str
    status: GameStatus = GameStatus.SCHEDULED
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    home_team: str = ""
    away_team: str = ""
    time: Optional[str] = None

    @property
    def is_final(self) -> bool:
        """Completed with both scores present."""
        return (
            self.status == GameStatus.COMPLETED
            and self.home_score is not None
            and self.away_score is not None
        )

    def involves(self, team_code: str) -> bool:
        return same_team(self.home_team_code, team_code) or same_team(self.away_team_code, team_code)

    def is_home(self, team_code: str) -> bool:
        return same_team(self.home_team_code, team_code)

    def scores_for(self, team_code: str) -> Optional[Tuple[int, int]]:
        """Return (team_score, opponent_score) from the team's side, or None."""
        if self.home_score is None or self.away_score is None:
            return None
        if self.is_home(team_code):
            return self.home_score, self.away_score
        return self.away_score, self.home_score

    def to_dict(self) -> Dict:
        payload = asdict(self)
        payload["status"] = self.status.value
        return payload


@dataclass(frozen=True)
class PlayerStats:
    """Season batting and pitching line for one player. Every field is optional."""
    avg: Optional[float] = None
    obp: Optional[float] = None
    slg: Optional[float] = None
    ops: Optional[float] = None
    home_runs: Optional[int] = None
    rbi: Optional[int] = None
    runs: Optional[int] = None
    hits: Optional[int] = None
    era: Optional[float] = None
    whip: Optional[float] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    strikeouts: Optional[int] = None
    saves: Optional[int] = None
    innings_pitched: Optional[float] = None
    earned_runs: Optional[int] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class TeamPerformanceMetrics:
    """
    Summary performance of one team over its completed games.

    Attributes:
        team_code: Canonical team code the metrics describe
        win_percentage: wins / total_games (0.0 without games)
        average_runs_scored: Mean runs scored per game
        average_runs_allowed: Mean runs allowed per game
        run_differential: average_runs_scored - average_runs_allowed
        total_games: Completed games with both scores present
        wins: Games where the team outscored the opponent
        losses: total_games - wins
        momentum: Recency-weighted win/loss indicator in [-1, 1]
        form: W/L string over the most recent games, oldest first
        team_batting_average: Mean batting average across the roster
        team_era: Mean ERA across pitchers (reported ERA, else earned runs over innings)
    """
    team_code: str = ""
    win_percentage: float = 0.0
    average_runs_scored: float = 0.0
    average_runs_allowed: float = 0.0
    run_differential: float = 0.0
    total_games: int = 0
    wins: int = 0
    losses: int = 0
    momentum: float = 0.0
    form: str = ""
    team_batting_average: float = 0.0
    team_era: float = 0.0

    @classmethod
    def empty(cls, team_code: str = "") -> "TeamPerformanceMetrics":
        return cls(team_code=canonicalize_team_code(team_code))

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class PerformanceDataPoint:
    x: int
    y: float
    date: Optional[Date]
    label: str

    def to_dict(self) -> Dict:
        return {
            "x": self.x,
            "y": self.y,
            "date": self.date.isoformat() if self.date else None,
            "label": self.label,
        }


@dataclass(frozen=True)
class GamePrediction:
    home_win_probability: float
    away_win_probability: float
    predicted_home_score: int
    predicted_away_score: int
    confidence: float
    key_factors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        payload = asdict(self)
        payload["key_factors"] = list(self.key_factors)
        return payload
