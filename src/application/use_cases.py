# src/application/use_cases.py - Application use cases

import logging

from ..domain.exceptions import ConfigValidationError
from ..domain.services import derive_rows, summarize_rows
from ..utils.error_handling import handle_service_errors
from .dto import SectionAnalysisRequest, SectionAnalysisResponse

logger = logging.getLogger(__name__)


class GetSectionAnalysisUseCase:
    """Use case for deriving one section's rows and summary.
    
    Rows are recomputed on every call; the derivation is pure and cheap
    so no caching is needed for correctness.
    """
    
    @handle_service_errors("analyze section", passthrough=(ConfigValidationError,))
    def execute(self, request: SectionAnalysisRequest) -> SectionAnalysisResponse:
        """Execute section analysis."""
        team_config = request.team_config
        section = team_config.get_section(request.section_name)
        
        rows = derive_rows(section, team_config.total_competitors)
        summary = summarize_rows(rows)
        
        logger.info(f"Analyzed {team_config.team_name} {section.name}: "
                    f"best={summary.best.key}, worst={summary.worst.key}, "
                    f"median={summary.median_percentile:.1f}")
        
        return SectionAnalysisResponse(
            team_name=team_config.team_name,
            short_name=team_config.short_name,
            section_name=section.name,
            total_competitors=team_config.total_competitors,
            rows=rows,
            summary=summary
        )
