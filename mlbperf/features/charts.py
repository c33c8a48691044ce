"""
Time-ordered chart series for a team's completed games.

Every series has one point per completed, fully-scored game, indexed by
the game's position in the date-sorted list, so the same x always refers
to the same game across series.
"""

from typing import Dict, Iterable, List, Mapping, Optional
import logging

import pandas as pd

from mlbperf.constants import DEFAULT_LABEL_FALLBACK_LENGTH, DEFAULT_MOMENTUM_WINDOW
from mlbperf.features.aggregate import completed_team_games
from mlbperf.features.momentum import momentum_series_values
from mlbperf.normalization.ids import canonicalize_team_code
from mlbperf.normalization.parsing import parse_game_date, short_date_label
from mlbperf.types import ChartType, Game, PerformanceDataPoint

logger = logging.getLogger(__name__)

_GAME_LOG_COLUMNS = ["date", "raw_date", "label", "team_score", "opponent_score", "won"]


def build_game_log(
    games: Iterable[Game],
    team_code: str,
    label_fallback_length: int = DEFAULT_LABEL_FALLBACK_LENGTH,
) -> pd.DataFrame:
    """
    One row per qualifying game, oldest first.

    The input is copied and sorted; the caller's list is never reordered.
    """
    code = canonicalize_team_code(team_code)
    rows = []
    for game in completed_team_games(games, code):
        team_score, opponent_score = game.scores_for(code)
        rows.append({
            "date": parse_game_date(game.date),
            "raw_date": game.date,
            "label": short_date_label(game.date, label_fallback_length),
            "team_score": team_score,
            "opponent_score": opponent_score,
            "won": team_score > opponent_score,
        })
    frame = pd.DataFrame(rows, columns=_GAME_LOG_COLUMNS)
    if frame.empty:
        return frame
    frame["team_score"] = frame["team_score"].astype(int)
    frame["opponent_score"] = frame["opponent_score"].astype(int)
    frame["won"] = frame["won"].astype(bool)
    frame["run_differential"] = frame["team_score"] - frame["opponent_score"]
    frame["win_percentage"] = frame["won"].astype(float).expanding().mean()
    return frame.reset_index(drop=True)


def _points(frame: pd.DataFrame, values: Iterable[float]) -> List[PerformanceDataPoint]:
    points = []
    for idx, (row, value) in enumerate(zip(frame.itertuples(index=False), values)):
        points.append(PerformanceDataPoint(
            x=idx,
            y=float(value),
            date=row.date,
            label=row.label,
        ))
    return points


def generate_performance_chart(
    games: Iterable[Game],
    team_code: str,
    chart_type: ChartType,
    window: int = DEFAULT_MOMENTUM_WINDOW,
    label_fallback_length: int = DEFAULT_LABEL_FALLBACK_LENGTH,
) -> List[PerformanceDataPoint]:
    """Build a single series; see generate_performance_charts for all of them."""
    return generate_performance_charts(
        games,
        team_code,
        window=window,
        label_fallback_length=label_fallback_length,
        chart_types=[ChartType(chart_type)],
    )[ChartType(chart_type)]


def generate_performance_charts(
    games: Iterable[Game],
    team_code: str,
    window: int = DEFAULT_MOMENTUM_WINDOW,
    label_fallback_length: int = DEFAULT_LABEL_FALLBACK_LENGTH,
    chart_types: Optional[Iterable[ChartType]] = None,
) -> Dict[ChartType, List[PerformanceDataPoint]]:
    """
    Build chart series for a team.

    Args:
        games: Game records for any number of teams
        team_code: Team to chart (case-insensitive)
        window: Trailing window for the momentum series
        label_fallback_length: Characters of the raw date kept when it won't parse
        chart_types: Series to build (defaults to all of them)

    Returns:
        Mapping of ChartType to its points. A team without completed games
        gets empty lists.
    """
    requested = [ChartType(tag) for tag in chart_types] if chart_types is not None else list(ChartType)
    code = canonicalize_team_code(team_code)
    games = list(games)
    frame = build_game_log(games, code, label_fallback_length)
    if frame.empty:
        return {chart_type: [] for chart_type in requested}

    charts: Dict[ChartType, List[PerformanceDataPoint]] = {}
    for chart_type in requested:
        if chart_type == ChartType.WIN_LOSS:
            values = frame["win_percentage"]
        elif chart_type == ChartType.RUNS_SCORED:
            values = frame["team_score"]
        elif chart_type == ChartType.RUNS_ALLOWED:
            values = frame["opponent_score"]
        elif chart_type == ChartType.RUN_DIFFERENTIAL:
            values = frame["run_differential"]
        else:
            values = momentum_series_values(completed_team_games(games, code), code, window)
        charts[chart_type] = _points(frame, values)

    logger.debug("Built %d chart series of %d points for %s", len(charts), len(frame), code)
    return charts


def charts_to_frame(charts: Mapping[ChartType, List[PerformanceDataPoint]]) -> pd.DataFrame:
    """Join series into one DataFrame indexed by x, one column per chart tag."""
    columns = {}
    dates = {}
    labels = {}
    for chart_type, points in charts.items():
        columns[ChartType(chart_type).value] = {point.x: point.y for point in points}
        for point in points:
            dates.setdefault(point.x, point.date)
            labels.setdefault(point.x, point.label)
    frame = pd.DataFrame(columns)
    if frame.empty:
        return frame
    frame.index.name = "x"
    frame = frame.sort_index()
    frame.insert(0, "label", pd.Series(labels))
    frame.insert(0, "date", pd.Series(dates))
    return frame
