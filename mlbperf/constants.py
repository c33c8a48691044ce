"""
Constants for mlbperf.

Provides game status aliases, chart series tags, and the
default tuning values shared by config and the analytics modules.
"""

from typing import Dict, List


# =============================================================================
# GAME STATUS
# =============================================================================

STATUS_SCHEDULED = "scheduled"
STATUS_LIVE = "live"
STATUS_COMPLETED = "completed"

# Raw status strings seen from feeds -> canonical status
STATUS_ALIASES: Dict[str, str] = {
    "scheduled": STATUS_SCHEDULED,
    "preview": STATUS_SCHEDULED,
    "pre-game": STATUS_SCHEDULED,
    "pregame": STATUS_SCHEDULED,
    "upcoming": STATUS_SCHEDULED,
    "live": STATUS_LIVE,
    "in progress": STATUS_LIVE,
    "in_progress": STATUS_LIVE,
    "in-progress": STATUS_LIVE,
    "completed": STATUS_COMPLETED,
    "final": STATUS_COMPLETED,
    "game over": STATUS_COMPLETED,
    "completed early": STATUS_COMPLETED,
}


# =============================================================================
# CHART SERIES
# =============================================================================

CHART_WIN_LOSS = "winLoss"
CHART_RUNS_SCORED = "runsScored"
CHART_RUNS_ALLOWED = "runsAllowed"
CHART_RUN_DIFFERENTIAL = "runDifferential"
CHART_MOMENTUM = "momentum"

ALL_CHART_TAGS: List[str] = [
    CHART_WIN_LOSS,
    CHART_RUNS_SCORED,
    CHART_RUNS_ALLOWED,
    CHART_RUN_DIFFERENTIAL,
    CHART_MOMENTUM,
]


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_MOMENTUM_WINDOW = 10
DEFAULT_FORM_LENGTH = 5
DEFAULT_LABEL_FALLBACK_LENGTH = 5

# Prediction blend
DEFAULT_HOME_FIELD_ADVANTAGE = 0.54  # Home teams win ~54% of games
DEFAULT_WIN_PCT_WEIGHT = 0.3
DEFAULT_RUN_DIFF_WEIGHT = 0.05
DEFAULT_MOMENTUM_WEIGHT = 0.1
DEFAULT_MATCHUP_WEIGHT = 0.2
DEFAULT_ERA_MATCHUP_FACTOR = 0.1
DEFAULT_MIN_PROBABILITY = 0.1
DEFAULT_MAX_PROBABILITY = 0.9

# Score projection
DEFAULT_LEAGUE_AVERAGE_ERA = 5.0
DEFAULT_ERA_SCORE_FACTOR = 0.1
DEFAULT_MAX_PREDICTED_SCORE = 15

# Confidence
DEFAULT_CONFIDENCE_GAMES_DIVISOR = 50.0
DEFAULT_MIN_CONFIDENCE = 0.1
DEFAULT_MAX_CONFIDENCE = 0.9

# Key factor thresholds
DEFAULT_RECORD_GAP_THRESHOLD = 0.1
DEFAULT_HOT_MOMENTUM_THRESHOLD = 0.2
DEFAULT_RUN_DIFF_GAP_THRESHOLD = 1.0

HOME_FIELD_FACTOR = "Home field advantage"


# =============================================================================
# RATE STAT CONSTANTS
# =============================================================================

FIP_CONSTANT = 3.2

WOBA_WEIGHTS: Dict[str, float] = {
    "walk": 0.69,
    "hbp": 0.719,
    "single": 0.87,
    "double": 1.217,
    "triple": 1.529,
    "home_run": 1.94,
}
