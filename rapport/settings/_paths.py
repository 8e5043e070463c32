"""Path constants for Rapport settings."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path(__file__).parent.parent / "settings.json"

__all__ = [
    "SETTINGS_FILE",
]
