# src/domain/services.py - Row derivation and section summaries

import logging
from typing import List, Sequence

from ..config import ABOVE_AVERAGE_THRESHOLD
from .entities import MetricObservation, Row, Section, SectionSummary
from .exceptions import ConfigValidationError
from .percentile import percentile_of

logger = logging.getLogger(__name__)


def derive_row(observation: MetricObservation, total_competitors: int) -> Row:
    """Resolve one observation into a display-ready Row."""
    if observation.rank is None:
        raise ConfigValidationError(f"Metric '{observation.key}' has no rank", observation.key, None)
    if observation.higher_is_better is None:
        raise ConfigValidationError(f"Metric '{observation.key}' has no orientation", observation.key, None)
    
    percentile = percentile_of(observation.rank, total_competitors, observation.higher_is_better)
    
    return Row(
        key=observation.key,
        label=observation.definition.label,
        formatted_value=observation.definition.format_value(observation.raw_value),
        raw_value=observation.raw_value,
        rank=observation.rank,
        percentile=percentile,
        higher_is_better=observation.higher_is_better,
        above_average=percentile >= ABOVE_AVERAGE_THRESHOLD
    )


def derive_rows(section: Section, total_competitors: int) -> List[Row]:
    """Derive one Row per metric in the section's declared order.
    
    Pure: the section is not mutated and repeated calls return equal rows.
    The order drives both the radar axes and the table rows.
    """
    rows = [derive_row(observation, total_competitors) for observation in section.observations]
    logger.debug(f"Derived {len(rows)} rows for section '{section.name}'")
    return rows


def summarize_rows(rows: Sequence[Row]) -> SectionSummary:
    """Summarize derived rows into best, worst and median percentile.
    
    Ties for best or worst go to the first row in order. The median is
    the element at index n // 2 of the ascending percentiles, i.e. the
    upper median for even-length sections rather than an average of the
    two middle values.
    """
    if not rows:
        raise ValueError("Cannot summarize an empty sequence of rows")
    
    best = rows[0]
    worst = rows[0]
    for row in rows[1:]:
        if row.percentile > best.percentile:
            best = row
        if row.percentile < worst.percentile:
            worst = row
    
    ordered = sorted(row.percentile for row in rows)
    median = ordered[len(ordered) // 2]
    
    return SectionSummary(best=best, worst=worst, median_percentile=median)
