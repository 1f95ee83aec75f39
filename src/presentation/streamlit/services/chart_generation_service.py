# src/presentation/streamlit/services/chart_generation_service.py - Chart generation service

import streamlit as st
import plotly.graph_objects as go
from typing import List, Optional
from ....application import SectionAnalysisResponse
from ....config import THEME_COLORS, ORIENTATION_TEXT
from ....config.savant_constants import PERCENTILE_RINGS, RANK_HINT_TEXT, PNG_EXPORT_WIDTH
from ....domain.metrics import round_half_up


class ChartGenerationService:
    """Service for generating interactive charts."""

    def __init__(self, use_dark_theme: Optional[bool] = None):
        # The dashboard is designed dark; a light Streamlit theme only swaps the template
        if use_dark_theme is None:
            use_dark_theme = st.get_option('theme.base') != 'light'
        self.use_dark_theme = use_dark_theme

        if self.use_dark_theme:
            self.plot_template = "plotly_dark"
            self.background_color = THEME_COLORS['background']
            self.panel_color = THEME_COLORS['panel']
            self.text_color = THEME_COLORS['text']
        else:
            self.plot_template = "plotly_white"
            self.background_color = '#ffffff'
            self.panel_color = '#f0f2f6'
            self.text_color = '#262730'

        self.good_color = THEME_COLORS['good']
        self.bad_color = THEME_COLORS['bad']
        self.grid_color = THEME_COLORS['grid']

    def create_percentile_radar_chart(self, analysis_response: SectionAnalysisResponse) -> go.Figure:
        """Create a radar chart with one axis per metric, valued by rounded percentile."""
        if not analysis_response.rows:
            return self._create_empty_chart("No metrics available")

        radar_data = analysis_response.radar_data
        categories = [point['metric'] for point in radar_data]
        values = [point['percentile'] for point in radar_data]

        # Close the radar chart
        categories.append(categories[0])
        values.append(values[0])

        fig = go.Figure()

        # Median ring drawn as a dashed reference trace
        fig.add_trace(go.Scatterpolar(
            r=[50] * len(categories),
            theta=categories,
            mode='lines',
            line=dict(color=self.grid_color, dash='dash', width=1),
            hoverinfo='skip',
            showlegend=False
        ))

        fig.add_trace(go.Scatterpolar(
            r=values,
            theta=categories,
            fill='toself',
            name=analysis_response.short_name.upper(),
            line_color=self.good_color,
            fillcolor='rgba(46, 139, 255, 0.28)',
            hovertemplate='<b>%{theta}</b><br>%{r} pct<extra></extra>'
        ))

        fig.update_layout(
            template=self.plot_template,
            paper_bgcolor=self.panel_color,
            polar=dict(
                bgcolor=self.panel_color,
                radialaxis=dict(
                    visible=True,
                    range=[0, 100],
                    tickvals=PERCENTILE_RINGS + [100],
                    angle=30,
                    gridcolor=self.grid_color,
                    tickfont=dict(size=10, color=THEME_COLORS['muted'])
                ),
                angularaxis=dict(
                    gridcolor=self.grid_color,
                    tickfont=dict(size=12, color=self.text_color)
                )
            ),
            title=dict(
                text=f"{analysis_response.section_name} – Radar",
                x=0,
                xanchor='left',
                font=dict(size=16)
            ),
            showlegend=False,
            height=440,
            margin=dict(l=60, r=60, t=60, b=40)
        )

        return fig

    def create_metric_table_figure(self, analysis_response: SectionAnalysisResponse) -> go.Figure:
        """Create a static table of the section for image export.

        Percentile cells are coloured by above/below average so the exported
        image keeps the same reading as the on-screen bars.
        """
        rows = analysis_response.rows
        if not rows:
            return self._create_empty_chart("No metrics available")

        total = analysis_response.total_competitors
        percentile_colors = [self.good_color if row.above_average else self.bad_color for row in rows]

        fig = go.Figure(data=[go.Table(
            columnwidth=[2, 1.2, 1, 1, 2],
            header=dict(
                values=['<b>Metric</b>', '<b>Raw</b>', '<b>Rank</b>', '<b>Percentile</b>', '<b>Orientation</b>'],
                fill_color=self.grid_color,
                font=dict(color=THEME_COLORS['text'], size=13),
                align='left'
            ),
            cells=dict(
                values=[
                    [row.label for row in rows],
                    [row.formatted_value for row in rows],
                    [f"{row.rank}/{total}" for row in rows],
                    [str(round_half_up(row.percentile)) for row in rows],
                    [ORIENTATION_TEXT[row.higher_is_better] for row in rows],
                ],
                fill_color=[[self.panel_color] * len(rows)] * 3 + [percentile_colors, [self.panel_color] * len(rows)],
                font=dict(color=THEME_COLORS['text'], size=12),
                align='left',
                height=28
            )
        )])

        summary = analysis_response.summary
        fig.update_layout(
            title=dict(
                text=(f"{analysis_response.team_name} · {analysis_response.section_name} – Metric Table"
                      f"<br><sup>Best: {summary.best.label} · Needs work: {summary.worst.label} · "
                      f"Median pct: {round_half_up(summary.median_percentile)} · Rank: {RANK_HINT_TEXT}</sup>"),
                x=0,
                xanchor='left',
                font=dict(size=16, color=THEME_COLORS['text'])
            ),
            paper_bgcolor=THEME_COLORS['background'],
            width=PNG_EXPORT_WIDTH,
            height=self._table_height(rows),
            margin=dict(l=20, r=20, t=80, b=20)
        )

        return fig

    @staticmethod
    def _table_height(rows: List) -> int:
        return 120 + 30 * (len(rows) + 1)

    def _create_empty_chart(self, message: str) -> go.Figure:
        """Create an empty chart with a message."""
        fig = go.Figure()

        fig.add_annotation(
            text=message,
            xref="paper", yref="paper",
            x=0.5, y=0.5,
            xanchor='center', yanchor='middle',
            font=dict(size=16, color=self.text_color)
        )

        fig.update_layout(
            template=self.plot_template,
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            height=400
        )

        return fig
