"""Shared constants used across the application."""

import logging

logger = logging.getLogger(__name__)

# ========== Health Score Bounds ==========
# Inclusive bounds every health update is clamped to
HEALTH_MIN = -100
HEALTH_MAX = 100

# Health assigned to a freshly created mutual relationship
DEFAULT_HEALTH_SCORE = 50

# Nominal range for a single event impact (not enforced by the ledger)
IMPACT_MIN = -30
IMPACT_MAX = 30

# ========== Generated Layout Positions ==========
# New people are dropped somewhere inside this box for the graph renderer
LAYOUT_ORIGIN_X = 200.0
LAYOUT_ORIGIN_Y = 150.0
LAYOUT_WIDTH = 400.0
LAYOUT_HEIGHT = 300.0


def clamp_health(score: int) -> int:
    """Clamp a health score to the inclusive [HEALTH_MIN, HEALTH_MAX] range.

    Args:
        score: Raw, possibly out-of-range, health value.

    Returns:
        The clamped value.
    """
    clamped = max(HEALTH_MIN, min(HEALTH_MAX, score))
    if clamped != score:
        logger.debug(f"clamp_health: {score} -> {clamped}")
    return clamped
