# src/presentation/streamlit/components/tab_manager.py - Tab management component

import logging
import streamlit as st
from ....application import GetSectionAnalysisUseCase, SectionAnalysisRequest, SectionAnalysisResponse, ExportFormat
from ....domain import TeamConfig
from ....domain.exceptions import ConfigValidationError, UseCaseError
from ....utils.error_handling import safe_execute
from ..services.chart_generation_service import ChartGenerationService
from ..services.export_service import ExportService, MIME_TYPES
from .metrics_renderer import MetricsRenderer

logger = logging.getLogger(__name__)


class TabManager:
    """Manages one tab per section and its content."""

    def __init__(self, metrics_renderer: MetricsRenderer = None):
        self._chart_service = ChartGenerationService()
        self._export_service = ExportService()
        self._metrics_renderer = metrics_renderer or MetricsRenderer()
        self._use_case = GetSectionAnalysisUseCase()

    def render_tabs(self, team_config: TeamConfig):
        """Render all section tabs with their content."""
        tab_names = team_config.tab_names
        tabs = st.tabs(tab_names)

        for index, (tab, section_name) in enumerate(zip(tabs, tab_names)):
            with tab:
                self._render_section_tab(team_config, section_name, index)

    def _render_section_tab(self, team_config: TeamConfig, section_name: str, index: int):
        """Render radar, metric table and exports for one section."""
        rejection = team_config.rejection_reason(section_name)
        if rejection:
            st.error(f"Section '{section_name}' could not be loaded: {rejection}")
            return

        try:
            analysis_response = self._use_case.execute(SectionAnalysisRequest(team_config, section_name))
        except ConfigValidationError as e:
            st.error(f"Section '{section_name}' has invalid data: {e}")
            return
        except UseCaseError as e:
            st.error(f"Analysis failed: {e}")
            return

        col1, col2 = st.columns([2, 3])

        with col1:
            st.plotly_chart(
                self._chart_service.create_percentile_radar_chart(analysis_response),
                use_container_width=True
            )
            self._metrics_renderer.render_legend()

        with col2:
            self._metrics_renderer.render_metric_table(analysis_response)
            self._render_export_controls(analysis_response, index)

    def _render_export_controls(self, analysis_response: SectionAnalysisResponse, index: int):
        """Render PNG, CSV and JSON export actions for the section.

        Widget keys use the tab position. The rendered PNG is stored with the
        response's content key and only offered while the data is unchanged.
        """
        section_key = f"section_{index}"
        png_state_key = f"png_export_{section_key}"
        content_key = analysis_response.content_key

        col1, col2, col3 = st.columns(3)

        with col1:
            if st.button("Export PNG", key=f"prepare_png_{section_key}"):
                with st.spinner("Rendering table image..."):
                    figure = self._chart_service.create_metric_table_figure(analysis_response)
                    png_bytes = safe_execute(
                        lambda: self._export_service.export_to_png(figure),
                        f"export {analysis_response.section_name} table to PNG"
                    )
                if png_bytes is None:
                    st.session_state.pop(png_state_key, None)
                    st.warning("PNG export is unavailable. CSV and JSON downloads still work.")
                else:
                    st.session_state[png_state_key] = (content_key, png_bytes)

            stored_key, png_bytes = st.session_state.get(png_state_key, (None, None))
            if png_bytes and stored_key == content_key:
                st.download_button(
                    label="Download PNG",
                    data=png_bytes,
                    file_name=self._export_service.file_name(analysis_response, ExportFormat.PNG),
                    mime=MIME_TYPES[ExportFormat.PNG],
                    key=f"download_png_{section_key}"
                )

        with col2:
            st.download_button(
                label="Download CSV",
                data=self._export_service.export_to_csv(analysis_response),
                file_name=self._export_service.file_name(analysis_response, ExportFormat.CSV),
                mime=MIME_TYPES[ExportFormat.CSV],
                key=f"download_csv_{section_key}"
            )

        with col3:
            st.download_button(
                label="Download JSON",
                data=self._export_service.export_to_json(analysis_response),
                file_name=self._export_service.file_name(analysis_response, ExportFormat.JSON),
                mime=MIME_TYPES[ExportFormat.JSON],
                key=f"download_json_{section_key}"
            )
