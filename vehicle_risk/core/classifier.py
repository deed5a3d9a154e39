"""Risk tier classification for the insurance risk engine."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np


class RiskLevel(Enum):
    """Discrete risk tiers in ascending order of score."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Lower bounds of MEDIUM and HIGH.  Each tier is left-closed.
RISK_THRESHOLDS: tuple[float, ...] = (1.2, 1.8)

_LEVELS: tuple[RiskLevel, ...] = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)


def categorize(score: float) -> RiskLevel:
    """Map a risk score to its tier.

        score < 1.2        -> LOW
        1.2 <= score < 1.8 -> MEDIUM
        score >= 1.8       -> HIGH

    Args:
        score: Finite, non-negative risk score.

    Returns:
        The matching :class:`RiskLevel`.

    Raises:
        ValueError: If ``score`` is NaN, infinite or negative.
    """
    if not math.isfinite(score) or score < 0.0:
        raise ValueError(f"score must be finite and >= 0, got {score}.")
    idx = int(np.searchsorted(RISK_THRESHOLDS, score, side="right"))
    return _LEVELS[idx]
