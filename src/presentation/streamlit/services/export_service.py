# src/presentation/streamlit/services/export_service.py - Data export service

import pandas as pd
import json
import logging
import plotly.graph_objects as go
from typing import Dict, Any
from io import BytesIO

from ....application import SectionAnalysisResponse, ExportFormat
from ....config import PNG_EXPORT_SCALE
from ....domain import Row, ExportError

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ExportFormat.PNG: "image/png",
    ExportFormat.CSV: "text/csv",
    ExportFormat.JSON: "application/json",
}


class ExportService:
    """Service for exporting section data to various formats."""

    def export_to_csv(self, analysis_response: SectionAnalysisResponse) -> bytes:
        """Export the section's rows to CSV format."""
        export_data = self._prepare_rows_data(analysis_response)

        buffer = BytesIO()
        export_data.to_csv(buffer, index=False)
        return buffer.getvalue()

    def export_to_json(self, analysis_response: SectionAnalysisResponse) -> str:
        """Export the section's rows and summary to JSON format."""
        summary = analysis_response.summary
        export_dict = {
            'team': analysis_response.team_name,
            'section': analysis_response.section_name,
            'total_competitors': analysis_response.total_competitors,
            'rows': [self._row_to_dict(row) for row in analysis_response.rows],
            'summary': {
                'best': summary.best.key,
                'worst': summary.worst.key,
                'median_percentile': summary.median_percentile
            }
        }

        return json.dumps(export_dict, indent=2)

    def export_to_png(self, figure: go.Figure) -> bytes:
        """Rasterize a figure to PNG with the kaleido engine."""
        try:
            return figure.to_image(format="png", scale=PNG_EXPORT_SCALE)
        except Exception as e:
            logger.error(f"PNG export failed: {e}")
            raise ExportError(f"PNG export requires the kaleido package: {e}",
                              ExportFormat.PNG.value, e) from e

    def file_name(self, analysis_response: SectionAnalysisResponse, export_format: ExportFormat) -> str:
        """Download file name, e.g. ucsd-offense-table.png."""
        return f"{analysis_response.export_basename}.{export_format.value}"

    def _prepare_rows_data(self, analysis_response: SectionAnalysisResponse) -> pd.DataFrame:
        """Prepare one export row per metric in display order."""
        if not analysis_response.rows:
            return pd.DataFrame()

        total = analysis_response.total_competitors
        rows_data = []
        for row in analysis_response.rows:
            rows_data.append({
                'Metric': row.label,
                'Key': row.key,
                'Value': row.formatted_value,
                'Raw': row.raw_value,
                'Rank': row.rank,
                'Total': total,
                'Percentile': round(row.percentile, 1),
                'Above_Average': row.above_average,
                'Orientation': row.orientation_text
            })

        return pd.DataFrame(rows_data)

    def _row_to_dict(self, row: Row) -> Dict[str, Any]:
        """Convert Row to dictionary."""
        return {
            'key': row.key,
            'label': row.label,
            'formatted_value': row.formatted_value,
            'raw_value': row.raw_value,
            'rank': row.rank,
            'percentile': row.percentile,
            'higher_is_better': row.higher_is_better,
            'above_average': row.above_average
        }
