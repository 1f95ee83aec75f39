"""Domain layer - business entities and core logic."""

# Core entities
from .entities import (
    MetricObservation, Section, TeamConfig, Row, SectionSummary
)

# Domain exceptions
from .exceptions import (
    SavantStatsException, DataAccessError, ConfigLoadError,
    DataValidationError, ConfigValidationError, UseCaseError, ExportError
)

# Metrics
from .metrics import SavantMetrics, MetricDefinition, MetricFormat

# Percentiles and row derivation
from .percentile import percentile_of
from .services import derive_rows, summarize_rows

# Validation
from .validation import SavantValidator
