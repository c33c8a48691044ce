"""CLI entry points: compute metrics, chart series and predictions from JSON files."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence
import argparse
import json
import logging
import uuid

from mlbperf.config import Config
from mlbperf.features.aggregate import calculate_team_performance
from mlbperf.features.charts import generate_performance_charts
from mlbperf.models.predictor import predict_game
from mlbperf.normalization.normalize import games_from_records, roster_from_records
from mlbperf.normalization.schema import SchemaValidationError
from mlbperf.ops.logging import configure_logging
from mlbperf.types import ChartType, Game, PlayerStats

logger = logging.getLogger(__name__)


def _read_records(path: str, key: str) -> List[Dict]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        # Accept {"games": [...]} / {"recent": [...], "upcoming": [...]} wrappers.
        if key in payload:
            return list(payload[key] or [])
        rows: List[Dict] = []
        for value in payload.values():
            if isinstance(value, list):
                rows.extend(value)
        return rows
    return list(payload or [])


def _load_games(path: str) -> List[Game]:
    return games_from_records(_read_records(path, "games"))


def _load_roster(path: Optional[str]) -> Optional[List[PlayerStats]]:
    if not path:
        return None
    return roster_from_records(_read_records(path, "players"))


def _team_label(games: List[Game], team_code: str) -> Optional[str]:
    """Display name for a team code, taken from the first game that carries one."""
    for game in games:
        if game.is_home(team_code) and game.home_team:
            return game.home_team
        if not game.is_home(team_code) and game.involves(team_code) and game.away_team:
            return game.away_team
    return None


def _emit(payload: Dict) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def run_metrics(
    games_path: str,
    team_code: str,
    roster_path: Optional[str] = None,
    config_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    games = _load_games(games_path)
    metrics = calculate_team_performance(team_code, games, _load_roster(roster_path), config)
    logger.info("Computed metrics for %s over %d games", metrics.team_code, metrics.total_games)
    _emit(metrics.to_dict())
    return 0


def run_charts(
    games_path: str,
    team_code: str,
    chart_type: Optional[str] = None,
    config_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    games = _load_games(games_path)
    chart_types = [ChartType(chart_type)] if chart_type else None
    charts = generate_performance_charts(
        games,
        team_code,
        window=config.momentum_window,
        label_fallback_length=config.label_fallback_length,
        chart_types=chart_types,
    )
    _emit({
        chart.value: [point.to_dict() for point in points]
        for chart, points in charts.items()
    })
    return 0


def run_predict(
    games_path: str,
    home_code: str,
    away_code: str,
    home_roster_path: Optional[str] = None,
    away_roster_path: Optional[str] = None,
    config_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    games = _load_games(games_path)
    home = calculate_team_performance(home_code, games, _load_roster(home_roster_path), config)
    away = calculate_team_performance(away_code, games, _load_roster(away_roster_path), config)
    prediction = predict_game(
        home,
        away,
        config,
        home_label=_team_label(games, home_code),
        away_label=_team_label(games, away_code),
    )
    _emit({
        "home": home.to_dict(),
        "away": away.to_dict(),
        "prediction": prediction.to_dict(),
    })
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MLB team performance analytics CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    metrics = subparsers.add_parser("metrics", help="Summary metrics for one team")
    metrics.add_argument("--config", dest="config_path", help="Path to config file")
    metrics.add_argument("--games", dest="games_path", required=True, help="Games JSON file")
    metrics.add_argument("--team", dest="team_code", required=True, help="Team code")
    metrics.add_argument("--roster", dest="roster_path", help="Roster JSON file")

    charts = subparsers.add_parser("charts", help="Chart series for one team")
    charts.add_argument("--config", dest="config_path", help="Path to config file")
    charts.add_argument("--games", dest="games_path", required=True, help="Games JSON file")
    charts.add_argument("--team", dest="team_code", required=True, help="Team code")
    charts.add_argument(
        "--type",
        dest="chart_type",
        choices=[chart.value for chart in ChartType],
        help="Only build this series",
    )

    predict = subparsers.add_parser("predict", help="Predict a game between two teams")
    predict.add_argument("--config", dest="config_path", help="Path to config file")
    predict.add_argument("--games", dest="games_path", required=True, help="Games JSON file")
    predict.add_argument("--home", dest="home_code", required=True, help="Home team code")
    predict.add_argument("--away", dest="away_code", required=True, help="Away team code")
    predict.add_argument("--home-roster", dest="home_roster_path", help="Home roster JSON file")
    predict.add_argument("--away-roster", dest="away_roster_path", help="Away roster JSON file")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(run_id=uuid.uuid4().hex[:8])

    try:
        if args.command == "metrics":
            return run_metrics(
                games_path=args.games_path,
                team_code=args.team_code,
                roster_path=getattr(args, "roster_path", None),
                config_path=getattr(args, "config_path", None),
            )
        if args.command == "charts":
            return run_charts(
                games_path=args.games_path,
                team_code=args.team_code,
                chart_type=getattr(args, "chart_type", None),
                config_path=getattr(args, "config_path", None),
            )
        if args.command == "predict":
            return run_predict(
                games_path=args.games_path,
                home_code=args.home_code,
                away_code=args.away_code,
                home_roster_path=getattr(args, "home_roster_path", None),
                away_roster_path=getattr(args, "away_roster_path", None),
                config_path=getattr(args, "config_path", None),
            )
    except (OSError, json.JSONDecodeError, SchemaValidationError) as exc:
        logger.error("Failed to run %s: %s", args.command, exc)
        return 1

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
