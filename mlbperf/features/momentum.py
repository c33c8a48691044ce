"""Recency-weighted momentum over a trailing window of games."""

from typing import List, Optional, Sequence
import logging

import numpy as np

from mlbperf.types import Game

logger = logging.getLogger(__name__)

_NORMALIZE_MODES = ("window", "weights")


def _outcome_signs(games: Sequence[Game], team_code: str) -> List[int]:
    signs = []
    for game in games:
        scores = game.scores_for(team_code)
        if scores is None:
            continue
        team_score, opponent_score = scores
        signs.append(1 if team_score > opponent_score else -1)
    return signs


def momentum_from_signs(signs: Sequence[int], normalize: str = "window") -> float:
    """
    Weighted average of +1/-1 outcomes, oldest first.

    The newest outcome weighs 1.0 and each older one 1/W less, so a window
    of W outcomes has weights 1/W, 2/W, ..., W/W. "window" divides the
    weighted sum by W; "weights" divides by the weight total, which pins an
    all-win window to exactly 1.0.
    """
    if normalize not in _NORMALIZE_MODES:
        raise ValueError(f"normalize must be one of {_NORMALIZE_MODES}, got {normalize!r}")
    size = len(signs)
    if size == 0:
        return 0.0
    weights = np.arange(1, size + 1, dtype=float) / size
    weighted = float(np.sum(np.asarray(signs, dtype=float) * weights))
    if normalize == "weights":
        return weighted / float(weights.sum())
    return weighted / size


def calculate_momentum(
    games: Sequence[Game],
    team_code: str,
    window: Optional[int] = None,
    normalize: str = "window",
) -> float:
    """
    Momentum over the trailing `window` games of a chronologically ordered list.

    Games without both scores are skipped before the window is taken.
    An empty window yields 0.0.
    """
    signs = _outcome_signs(games, team_code)
    if window is not None:
        if window <= 0:
            return 0.0
        signs = signs[-window:]
    return momentum_from_signs(signs, normalize=normalize)


def momentum_series_values(
    games: Sequence[Game],
    team_code: str,
    window: int,
    normalize: str = "window",
) -> List[float]:
    """Momentum at every game, each over the `min(i + 1, window)` games ending there."""
    signs = _outcome_signs(games, team_code)
    values = []
    for idx in range(len(signs)):
        start = max(0, idx + 1 - window) if window > 0 else idx + 1
        values.append(momentum_from_signs(signs[start:idx + 1], normalize=normalize))
    logger.debug("Built %d momentum points for %s (window=%d)", len(values), team_code, window)
    return values
