# src/presentation/streamlit/streamlit_controller.py - Streamlit controller

import streamlit as st
import logging
from typing import Optional, Tuple

from ...domain import TeamConfig
from ...domain.exceptions import ConfigLoadError, ConfigValidationError
from ...infrastructure import config_stamp, load_team_config, resolve_config_path
from .components.metrics_renderer import MetricsRenderer
from .components.tab_manager import TabManager
from .styling.app_styling import inject_custom_css, inject_theme_colors

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def get_team_config(config_path: str, stamp: Optional[Tuple[int, int]] = None) -> TeamConfig:
    """Load the team configuration once per path and file version.

    stamp is only part of the cache key; pass config_stamp(config_path) so an
    edited file is picked up on the next rerun.
    """
    return load_team_config(config_path, strict=False)


class StreamlitController:
    """Streamlit controller."""

    def __init__(self):
        self.metrics_renderer = MetricsRenderer()
        self.tab_manager = TabManager(self.metrics_renderer)

    def run(self) -> None:
        """Main entry point for the Streamlit application."""
        try:
            st.set_page_config(
                page_title="Savant Percentiles",
                page_icon="⚾",
                layout="wide"
            )

            inject_theme_colors()
            inject_custom_css()

            team_config = self._load_team_config()
            if team_config is None:
                return

            self.metrics_renderer.render_team_header(team_config.team_name, team_config.total_competitors)
            self.tab_manager.render_tabs(team_config)
            self.metrics_renderer.render_takeaways(team_config.takeaway_map)

        except Exception as e:
            logger.error(f"Application error: {e}")
            st.error("An unexpected error occurred. Please try refreshing the page.")

    def _load_team_config(self):
        """Load the configured dataset, reporting problems instead of guessing."""
        config_path = str(resolve_config_path())
        try:
            return get_team_config(config_path, config_stamp(config_path))
        except ConfigLoadError as e:
            logger.error(f"Failed to load team configuration: {e}")
            st.error(f"Could not read the team configuration: {e}")
        except ConfigValidationError as e:
            logger.error(f"Invalid team configuration: {e}")
            st.error(f"The team configuration is invalid: {e}")
        return None


def main():
    """Main entry point for the Streamlit application."""
    controller = StreamlitController()
    controller.run()


if __name__ == "__main__":
    main()
