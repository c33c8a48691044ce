"""Configuration for analytics windows and prediction tunables."""

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Dict, Mapping
import json
import os

from mlbperf import constants

_ENV_PREFIX = "MLBPERF_"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _coerce_float(value: Optional[str], default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _coerce_int(value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _parse_env_file(path: Path) -> Dict[str, str]:
    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = _strip_quotes(value.strip())
    return data


def _load_config_data(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix.lower() == ".json":
        payload = json.loads(path.read_text(encoding="utf-8"))
        return {str(k): str(v) for k, v in payload.items()}
    return _parse_env_file(path)


@dataclass
class Config:
    # Windows
    momentum_window: int = constants.DEFAULT_MOMENTUM_WINDOW
    form_length: int = constants.DEFAULT_FORM_LENGTH
    label_fallback_length: int = constants.DEFAULT_LABEL_FALLBACK_LENGTH

    # Win probability blend
    home_field_advantage: float = constants.DEFAULT_HOME_FIELD_ADVANTAGE
    win_pct_weight: float = constants.DEFAULT_WIN_PCT_WEIGHT
    run_diff_weight: float = constants.DEFAULT_RUN_DIFF_WEIGHT
    momentum_weight: float = constants.DEFAULT_MOMENTUM_WEIGHT
    matchup_weight: float = constants.DEFAULT_MATCHUP_WEIGHT
    era_matchup_factor: float = constants.DEFAULT_ERA_MATCHUP_FACTOR
    min_probability: float = constants.DEFAULT_MIN_PROBABILITY
    max_probability: float = constants.DEFAULT_MAX_PROBABILITY

    # Score projection
    league_average_era: float = constants.DEFAULT_LEAGUE_AVERAGE_ERA
    era_score_factor: float = constants.DEFAULT_ERA_SCORE_FACTOR
    max_predicted_score: int = constants.DEFAULT_MAX_PREDICTED_SCORE

    # Confidence bounds
    confidence_games_divisor: float = constants.DEFAULT_CONFIDENCE_GAMES_DIVISOR
    min_confidence: float = constants.DEFAULT_MIN_CONFIDENCE
    max_confidence: float = constants.DEFAULT_MAX_CONFIDENCE

    # Key factor thresholds
    record_gap_threshold: float = constants.DEFAULT_RECORD_GAP_THRESHOLD
    hot_momentum_threshold: float = constants.DEFAULT_HOT_MOMENTUM_THRESHOLD
    run_diff_gap_threshold: float = constants.DEFAULT_RUN_DIFF_GAP_THRESHOLD

    @staticmethod
    def env_key(name: str) -> str:
        return _ENV_PREFIX + name.upper()

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Optional[str]], base: "Config") -> "Config":
        values = {}
        for item in fields(cls):
            raw = data.get(cls.env_key(item.name))
            current = getattr(base, item.name)
            if item.type in (int, "int"):
                values[item.name] = _coerce_int(raw, current)
            else:
                values[item.name] = _coerce_float(raw, current)
        return cls(**values)

    @classmethod
    def from_env(cls) -> "Config":
        return cls._from_mapping(os.environ, cls())

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        env_config = cls.from_env()
        if not config_path:
            return env_config
        file_data = _load_config_data(Path(config_path))
        return cls._from_mapping(file_data, env_config)

    def to_dict(self) -> Dict[str, str]:
        return {k: str(v) for k, v in asdict(self).items()}
