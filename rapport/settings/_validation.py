"""Validation functions for Settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rapport.settings._types import LOG_LEVELS
from rapport.utils.constants import HEALTH_MAX, HEALTH_MIN

if TYPE_CHECKING:
    from rapport.settings._settings import Settings

logger = logging.getLogger(__name__)


def validate(settings: Settings) -> bool:
    """Validate all settings fields.

    Returns:
        True if any settings were normalized during validation, False otherwise.
        Callers can use this to decide whether to re-save the settings file.

    Raises:
        ValueError: If any field contains an invalid value.
    """
    changed = _normalize_log_level(settings)
    _validate_log_level(settings)
    _validate_health(settings)
    _validate_layout(settings)
    return changed


def _normalize_log_level(settings: Settings) -> bool:
    """Upper-case the log level so "debug" is accepted."""
    if isinstance(settings.log_level, str) and settings.log_level != settings.log_level.upper():
        logger.info("Normalizing log_level %r to %r", settings.log_level, settings.log_level.upper())
        settings.log_level = settings.log_level.upper()
        return True
    return False


def _validate_log_level(settings: Settings) -> None:
    """Validate log_level is a known logging level."""
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {list(LOG_LEVELS.keys())}, got {settings.log_level}"
        )


def _validate_health(settings: Settings) -> None:
    """Validate default_health_score lies inside the clamp bounds."""
    if isinstance(settings.default_health_score, bool) or not isinstance(
        settings.default_health_score, int
    ):
        raise ValueError(
            f"default_health_score must be an integer, got {settings.default_health_score!r}"
        )
    if not HEALTH_MIN <= settings.default_health_score <= HEALTH_MAX:
        raise ValueError(
            f"default_health_score must be between {HEALTH_MIN} and {HEALTH_MAX}, "
            f"got {settings.default_health_score}"
        )


def _validate_layout(settings: Settings) -> None:
    """Validate the box new people are placed in."""
    if settings.layout_width <= 0:
        raise ValueError(f"layout_width must be positive, got {settings.layout_width}")
    if settings.layout_height <= 0:
        raise ValueError(f"layout_height must be positive, got {settings.layout_height}")
