# src/domain/entities.py - Core domain entities

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from ..config import ORIENTATION_TEXT
from .exceptions import ConfigValidationError
from .metrics import MetricDefinition, SavantMetrics
from .validation import SavantValidator


@dataclass(frozen=True)
class MetricObservation:
    """One metric's data for the subject team."""
    definition: MetricDefinition
    raw_value: float
    rank: int
    higher_is_better: bool

    @property
    def key(self) -> str:
        return self.definition.key


@dataclass(frozen=True)
class Section:
    """A named group of metrics sharing one competitor pool, in declared order."""
    name: str
    observations: Tuple[MetricObservation, ...]

    @classmethod
    def from_mappings(cls, name: str, raw: Mapping, ranks: Mapping,
                      better: Optional[Mapping] = None) -> 'Section':
        """Factory method to build a validated Section from parallel mappings.

        Metric order follows the raw mapping's insertion order. When no
        orientation mapping is given, each metric uses its registered
        default orientation.
        """
        SavantValidator.validate_section_keys(name, raw, ranks, better)

        observations = []
        for key in raw:
            definition = SavantMetrics.resolve(key)
            if better is not None:
                higher = SavantValidator.validate_orientation(better[key], key, name)
            else:
                higher = definition.higher_is_better
            observations.append(MetricObservation(
                definition=definition,
                raw_value=SavantValidator.validate_raw_value(raw[key], key, name),
                rank=SavantValidator.validate_rank(ranks[key], key, name),
                higher_is_better=higher
            ))

        return cls(name=name, observations=tuple(observations))

    @property
    def metric_keys(self) -> List[str]:
        return [obs.key for obs in self.observations]

    def __len__(self) -> int:
        return len(self.observations)


@dataclass(frozen=True)
class TeamConfig:
    """Static root: team name, competitor pool size and ordered sections."""
    team_name: str
    total_competitors: int
    sections: Tuple[Section, ...]
    short_name: str = ""
    takeaways: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    rejected_sections: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    declared_order: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate configuration after initialization."""
        SavantValidator.validate_total_competitors(self.total_competitors)
        if not self.sections:
            raise ConfigValidationError("Team configuration must define at least one section",
                                        "sections", self.sections)

        # Names double as tab labels, widget keys and export file names
        SavantValidator.validate_unique_names(self.section_names)
        if self.declared_order:
            SavantValidator.validate_unique_names(self.declared_order)

    @property
    def section_names(self) -> List[str]:
        return [section.name for section in self.sections]

    def get_section(self, name: str) -> Section:
        """Get a section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        raise ConfigValidationError(
            f"Unknown section: {name}. Must be one of: {', '.join(self.section_names)}",
            "section", name
        )

    @property
    def tab_names(self) -> List[str]:
        """Every declared section, valid or rejected, in declared order."""
        return list(self.declared_order) or self.section_names

    def rejection_reason(self, name: str) -> Optional[str]:
        """Validation message for a section that failed to build, if any."""
        return dict(self.rejected_sections).get(name)

    @property
    def takeaway_map(self) -> Dict[str, str]:
        return dict(self.takeaways)


@dataclass(frozen=True)
class Row:
    """Display-ready view of one metric observation."""
    key: str
    label: str
    formatted_value: str
    raw_value: float
    rank: int
    percentile: float
    higher_is_better: bool
    above_average: bool

    @property
    def orientation_text(self) -> str:
        return ORIENTATION_TEXT[self.higher_is_better]


@dataclass(frozen=True)
class SectionSummary:
    """Best, worst and median percentile over a section's rows."""
    best: Row
    worst: Row
    median_percentile: float
