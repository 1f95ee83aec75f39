# src/presentation/streamlit/components/metrics_renderer.py - Metrics display component

import streamlit as st
import html
import logging
from typing import Dict
from ....application import SectionAnalysisResponse
from ....config import THEME_COLORS
from ....config.savant_constants import RANK_HINT_TEXT, TAKEAWAY_CATEGORIES
from ....domain import Row, SectionSummary
from ....domain.metrics import plain_value_text, round_half_up

logger = logging.getLogger(__name__)


def _row_color(row: Row) -> str:
    return THEME_COLORS['good'] if row.above_average else THEME_COLORS['bad']


def _hoverable(value: str, tip: str, dotted: bool = False) -> str:
    css_class = "hoverable dotted" if dotted else "hoverable"
    return (f'<span class="{css_class}">{html.escape(value)}'
            f'<span class="tip">{html.escape(tip)}</span></span>')


def build_metric_table_html(analysis_response: SectionAnalysisResponse) -> str:
    """Build the metric table markup: label, raw value, rank and percentile bar per row."""
    total = analysis_response.total_competitors
    body = []
    for row in analysis_response.rows:
        raw_tip = f"Raw: {plain_value_text(row.raw_value)} • {row.orientation_text}"
        pct_tip = f"{round_half_up(row.percentile)} pct • {row.orientation_text}"
        bar = (f'<span class="hoverable"><span class="bar"><span class="mid"></span>'
               f'<span class="fill" style="display:block; width: {row.percentile:.1f}%; '
               f'background: {_row_color(row)};"></span></span>'
               f'<span class="tip">{html.escape(pct_tip)}</span></span>')
        body.append(
            "<tr>"
            f"<td>{html.escape(row.label)}</td>"
            f"<td>{_hoverable(row.formatted_value, raw_tip, dotted=True)}</td>"
            f"<td>{_hoverable(f'{row.rank}/{total}', RANK_HINT_TEXT)}</td>"
            f"<td>{bar}</td>"
            "</tr>"
        )

    return (
        '<table class="savant-table">'
        "<thead><tr><th>Metric</th><th>Raw</th><th>Rank</th><th>Percentile</th></tr></thead>"
        f"<tbody>{''.join(body)}</tbody>"
        "</table>"
    )


def build_summary_kpis_html(summary: SectionSummary) -> str:
    """Build the Best / Needs work / Median pct strip."""
    return (
        '<div class="kpis">'
        f'<div class="kpi">Best: <b>{html.escape(summary.best.label)}</b></div>'
        f'<div class="kpi">Needs work: <b>{html.escape(summary.worst.label)}</b></div>'
        f'<div class="kpi">Median pct: <b>{round_half_up(summary.median_percentile)}</b></div>'
        '</div>'
    )


class MetricsRenderer:
    """Renders the team header, metric table, KPIs and takeaways."""

    def render_team_header(self, team_name: str, total_competitors: int):
        """Render the page header with the team name and pool size."""
        safe_name = html.escape(str(team_name))
        st.markdown(f"""
        <div class="savant-header">{safe_name} – Savant Percentiles</div>
        <div class="savant-subtitle">
            Percentiles against {int(total_competitors)} conference teams.
            Blue = Above Average (Good) | Red = Below Average (Needs Work). Hover any value for details.
        </div>
        """, unsafe_allow_html=True)

    def render_legend(self):
        """Render the above/below average colour legend."""
        st.markdown(f"""
        <div class="legend">
            <span><span class="sw" style="background: {THEME_COLORS['good']};"></span>Above average</span>
            <span><span class="sw" style="background: {THEME_COLORS['bad']};"></span>Below average</span>
        </div>
        """, unsafe_allow_html=True)

    def render_metric_table(self, analysis_response: SectionAnalysisResponse):
        """Render the hoverable metric table with its summary strip."""
        safe_title = html.escape(f"{analysis_response.section_name} – Metric Table")
        st.markdown(
            f'<div class="savant-card"><h2>{safe_title}</h2>'
            f'{build_metric_table_html(analysis_response)}'
            f'{build_summary_kpis_html(analysis_response.summary)}</div>',
            unsafe_allow_html=True
        )

    def render_takeaways(self, takeaways: Dict[str, str]):
        """Render takeaway chips in Strengths / Neutral / Weaknesses order."""
        if not takeaways:
            return

        ordered = [c for c in TAKEAWAY_CATEGORIES if c in takeaways]
        ordered += [c for c in takeaways if c not in ordered]

        columns = st.columns(len(ordered))
        for column, category in zip(columns, ordered):
            css_class = "chip bad" if category == 'Weaknesses' else "chip"
            with column:
                st.markdown(
                    f'<div class="{css_class}"><h3>{html.escape(category)}</h3>'
                    f'<div>{html.escape(takeaways[category])}</div></div>',
                    unsafe_allow_html=True
                )
