# src/application/dto.py - Data Transfer Objects with validation

from dataclasses import dataclass
from typing import Any, Dict, List
from enum import Enum
from ..domain.entities import Row, SectionSummary, TeamConfig
from ..domain.metrics import round_half_up
from ..domain.exceptions import ConfigValidationError


class ExportFormat(Enum):
    """Supported export formats for section data."""
    PNG = "png"
    CSV = "csv"
    JSON = "json"


@dataclass
class SectionAnalysisRequest:
    """Request for one section's rows and summary."""
    team_config: TeamConfig
    section_name: str
    
    def __post_init__(self):
        """Validate input data after initialization."""
        self._validate_team_config()
        self._validate_section_name()
    
    def _validate_team_config(self):
        """Validate a team configuration was supplied."""
        if not isinstance(self.team_config, TeamConfig):
            raise ConfigValidationError("team_config must be a TeamConfig", "team_config", self.team_config)
    
    def _validate_section_name(self):
        """Validate the section exists in the configuration."""
        if not isinstance(self.section_name, str):
            raise ConfigValidationError("section_name must be a string", "section_name", self.section_name)
        self.section_name = self.section_name.strip()
        if self.section_name not in self.team_config.section_names:
            raise ConfigValidationError(
                f"Unknown section: {self.section_name}. "
                f"Must be one of: {', '.join(self.team_config.section_names)}",
                "section_name", self.section_name
            )


@dataclass
class SectionAnalysisResponse:
    """Response containing a section's derived rows and summary."""
    team_name: str
    short_name: str
    section_name: str
    total_competitors: int
    rows: List[Row]
    summary: SectionSummary
    
    @property
    def radar_data(self) -> List[Dict[str, Any]]:
        """Label / rounded percentile pairs in row order, one per radar axis."""
        return [{'metric': row.label, 'percentile': round_half_up(row.percentile)} for row in self.rows]
    
    @property
    def export_basename(self) -> str:
        return f"{self.short_name}-{self.section_name.lower()}-table"
    
    @property
    def content_key(self) -> int:
        """Changes whenever any displayed value of the section changes."""
        return hash((self.team_name, self.section_name, self.total_competitors, tuple(self.rows)))
