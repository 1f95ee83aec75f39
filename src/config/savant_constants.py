# src/config/savant_constants.py - Centralized dashboard constants and configuration

from pathlib import Path

# Bundled dataset, overridable via environment variable
DEFAULT_TEAM_CONFIG_PATH = Path(__file__).parent / "team_config.yaml"
TEAM_CONFIG_ENV_VAR = "SAVANT_TEAM_CONFIG"

# Percentile classification
ABOVE_AVERAGE_THRESHOLD = 50.0
MIN_TOTAL_COMPETITORS = 2

# Radar chart rings
PERCENTILE_RINGS = [25, 50, 75]

# Dark theme palette
THEME_COLORS = {
    'background': '#0B132B',
    'panel': '#16213E',
    'grid': '#1F4068',
    'text': '#FFFFFF',
    'muted': '#C7D2FE',
    'good': '#2E8BFF',
    'bad': '#FF3B3B',
}

ORIENTATION_TEXT = {
    True: 'Higher is better',
    False: 'Lower is better',
}

RANK_HINT_TEXT = '1 is best'

# Takeaway chips in display order
TAKEAWAY_CATEGORIES = ['Strengths', 'Neutral', 'Weaknesses']

# Export settings
PNG_EXPORT_SCALE = 2
PNG_EXPORT_WIDTH = 900
