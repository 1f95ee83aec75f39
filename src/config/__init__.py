# src/config/__init__.py - Configuration constants

from .savant_constants import (
    DEFAULT_TEAM_CONFIG_PATH, TEAM_CONFIG_ENV_VAR,
    ABOVE_AVERAGE_THRESHOLD, MIN_TOTAL_COMPETITORS, THEME_COLORS,
    ORIENTATION_TEXT, PNG_EXPORT_SCALE
)
