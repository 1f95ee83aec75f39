"""Application layer - Data Transfer Objects and Use Cases."""

# Data Transfer Objects
from .dto import (
    SectionAnalysisRequest, SectionAnalysisResponse, ExportFormat
)

# Use Cases
from .use_cases import GetSectionAnalysisUseCase
