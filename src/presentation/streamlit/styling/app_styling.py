# src/presentation/streamlit/styling/app_styling.py - Application styling

import streamlit as st
from typing import Dict
from ....config import THEME_COLORS


def inject_custom_css():
    """Inject custom CSS for the metric table, tooltips, KPIs and takeaway chips."""
    st.markdown("""
    <style>

    /* Header */
    .savant-header {
        font-size: 2em;
        font-weight: 700;
        margin-bottom: 0.5rem;
        color: var(--text);
    }
    .savant-subtitle {
        font-size: 0.9em;
        color: var(--muted);
        margin-bottom: 1rem;
    }

    /* Panels */
    .savant-card {
        background: var(--panel);
        border-radius: 16px;
        padding: 16px;
        color: var(--text);
    }
    .savant-card h2 {
        font-size: 1.1em;
        margin: 0 0 12px 0;
    }

    /* Metric table */
    .savant-table {
        width: 100%;
        border-collapse: collapse;
        font-size: 0.9em;
    }
    .savant-table th, .savant-table td {
        text-align: left;
        padding: 8px 12px 8px 0;
        border-bottom: 1px solid #374151;
    }
    .savant-table tr:last-child td { border-bottom: none; }

    /* Hover tooltips */
    .hoverable { position: relative; cursor: default; }
    .hoverable.dotted { text-decoration: underline dotted; text-underline-offset: 4px; }
    .hoverable .tip {
        pointer-events: none;
        position: absolute;
        top: -2.2em;
        left: 50%;
        transform: translateX(-50%);
        opacity: 0;
        transition: opacity 0.2s;
        white-space: nowrap;
        padding: 2px 8px;
        border-radius: 4px;
        background: rgba(0, 0, 0, 0.8);
        color: #fff;
        font-size: 0.75em;
        border: 1px solid rgba(255, 255, 255, 0.2);
        z-index: 10;
    }
    .hoverable:hover .tip { opacity: 1; }

    /* Percentile bar */
    .bar {
        position: relative;
        width: 12rem;
        height: 8px;
        background: #374151;
        border-radius: 9999px;
        overflow: hidden;
        display: inline-block;
        vertical-align: middle;
    }
    .bar .mid {
        position: absolute;
        left: 50%;
        top: 0;
        bottom: 0;
        width: 1px;
        background: rgba(156, 163, 175, 0.7);
    }
    .bar .fill { height: 100%; transition: width 0.3s; }

    /* Legend */
    .legend { display: flex; gap: 16px; font-size: 0.85em; margin-top: 8px; }
    .legend .sw {
        display: inline-block;
        width: 10px;
        height: 10px;
        border-radius: 2px;
        margin-right: 6px;
    }

    /* KPIs */
    .kpis { display: flex; gap: 12px; margin-top: 16px; flex-wrap: wrap; }
    .kpi {
        background: var(--grid);
        border-radius: 10px;
        padding: 8px 12px;
        font-size: 0.9em;
    }

    /* Takeaway chips */
    .chip {
        background: var(--grid);
        border: 1px solid var(--good);
        border-radius: 12px;
        padding: 12px 16px;
        color: var(--text);
    }
    .chip h3 { font-size: 1em; margin: 0 0 4px 0; color: var(--good); }
    .chip.bad { border-color: var(--bad); }
    .chip.bad h3 { color: var(--bad); }

    </style>
    """, unsafe_allow_html=True)


def inject_theme_colors(colors: Dict[str, str] = None):
    """Inject the dashboard palette as CSS variables."""
    palette = dict(THEME_COLORS)
    if colors:
        palette.update(colors)

    variables = "\n".join(f"        --{name}: {value};" for name, value in palette.items())

    st.markdown(f"""
    <style>
    :root {{
{variables}
    }}

    .stApp {{
        background: var(--background);
        color: var(--text);
    }}
    </style>
    """, unsafe_allow_html=True)
