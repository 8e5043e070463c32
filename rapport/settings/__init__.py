"""Settings package for Rapport.

- _paths.py: Path of the settings file
- _types.py: Choice tables used by validation
- _validation.py: Settings validation functions
- _settings.py: Main Settings dataclass
"""

from rapport.settings._paths import SETTINGS_FILE
from rapport.settings._settings import Settings
from rapport.settings._types import LOG_LEVELS

__all__ = [
    "LOG_LEVELS",
    "SETTINGS_FILE",
    "Settings",
]
