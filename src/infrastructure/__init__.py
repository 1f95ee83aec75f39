"""Infrastructure layer - external adapters and implementations."""

from .config.team_config_loader import (
    load_team_config, build_team_config, resolve_config_path, config_stamp
)
