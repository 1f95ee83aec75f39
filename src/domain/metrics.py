# src/domain/metrics.py - Centralized metric definitions and formatting rules

"""
Centralized definitions for baseball team metrics.
This module is the single source of truth for metric labels, default
orientation and display formatting. Formatting is a dispatch table keyed
by metric id so new metrics never touch the percentile or row logic.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (scoreboard style)."""
    return int(math.floor(value + 0.5))


def plain_value_text(value) -> str:
    """Generic number-to-string conversion used when no rule is registered."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class MetricFormat:
    """Display rule for a raw metric value.

    decimals=None means plain string conversion; decimals=0 rounds half up
    to an integer. The value is multiplied by scale before formatting and
    suffix is appended afterwards.
    """
    decimals: Optional[int] = None
    scale: float = 1.0
    suffix: str = ""

    def apply(self, value: float) -> str:
        if self.decimals is None:
            return plain_value_text(value) + self.suffix
        scaled = value * self.scale
        if self.decimals == 0:
            return f"{round_half_up(scaled)}{self.suffix}"
        return f"{scaled:.{self.decimals}f}{self.suffix}"


# Shared rules
RATE_3 = MetricFormat(decimals=3)
RATE_2 = MetricFormat(decimals=2)
PERCENT_1 = MetricFormat(decimals=1, scale=100.0, suffix="%")
PERCENT_0 = MetricFormat(decimals=0, scale=100.0, suffix="%")
COUNT = MetricFormat(decimals=0)
PLAIN = MetricFormat()


@dataclass(frozen=True)
class MetricDefinition:
    """Definition of a metric with all its properties."""
    key: str                          # Internal key used in configs (e.g., 'BBpct')
    label: str                        # Human-readable label (e.g., 'BB%')
    higher_is_better: bool = True     # Default orientation when a section does not declare one
    metric_format: MetricFormat = PLAIN
    description: str = ""

    def format_value(self, value: float) -> str:
        return self.metric_format.apply(value)


class SavantMetrics:
    """Registry of every metric the dashboard knows how to label and format."""

    # Offense
    WOBA = MetricDefinition('wOBA', 'wOBA', True, RATE_3, 'Weighted on-base average')
    OPS = MetricDefinition('OPS', 'OPS', True, RATE_3, 'On-base plus slugging')
    AVG = MetricDefinition('AVG', 'AVG', True, RATE_3, 'Batting average')
    BB_PCT = MetricDefinition('BBpct', 'BB%', True, PERCENT_1, 'Walks per plate appearance')
    K_PCT = MetricDefinition('Kpct', 'K%', False, PERCENT_1, 'Strikeouts per plate appearance')
    K_LOOKING_PCT = MetricDefinition(
        'KLookingPct', 'K Looking%', False, PERCENT_1, 'Share of strikeouts taken looking'
    )
    SB_PCT = MetricDefinition('SBpct', 'SB%', True, PERCENT_0, 'Stolen base success rate')
    HR = MetricDefinition('HR', 'HR', True, COUNT, 'Home runs hit')

    # Pitching (lower is better unless noted)
    ERA = MetricDefinition('ERA', 'ERA', False, RATE_2, 'Earned runs allowed per nine innings')
    WHIP = MetricDefinition('WHIP', 'WHIP', False, RATE_2, 'Walks plus hits per inning pitched')
    FIP = MetricDefinition('FIP', 'FIP', False, RATE_2, 'Fielding independent pitching')
    K = MetricDefinition('K', 'K', True, COUNT, 'Strikeouts recorded by the staff')
    BB = MetricDefinition('BB', 'BB', False, COUNT, 'Walks allowed')
    HR_ALLOWED = MetricDefinition('HRAllowed', 'HR Allowed', False, COUNT, 'Home runs allowed')
    BAVG = MetricDefinition('BAVG', 'Opp BAVG', False, RATE_3, 'Opponent batting average')

    # Fielding
    FLD = MetricDefinition('FLD', 'FLD%', True, RATE_3, 'Fielding percentage')
    ERRORS = MetricDefinition('Errors', 'Errors', False, COUNT, 'Errors committed')
    SB_AGAINST_PCT = MetricDefinition(
        'SBAgainstPct', 'SB Against%', False, PERCENT_1, 'Opponent stolen base success rate'
    )
    PB = MetricDefinition('PB', 'Passed Balls', False, COUNT, 'Passed balls')
    DPS = MetricDefinition('DPs', 'Double Plays', True, COUNT, 'Double plays turned')

    @classmethod
    def get_all_metrics(cls) -> List[MetricDefinition]:
        """Get all metric definitions."""
        return [
            cls.WOBA, cls.OPS, cls.AVG, cls.BB_PCT, cls.K_PCT,
            cls.K_LOOKING_PCT, cls.SB_PCT, cls.HR,
            cls.ERA, cls.WHIP, cls.FIP, cls.K, cls.BB, cls.HR_ALLOWED, cls.BAVG,
            cls.FLD, cls.ERRORS, cls.SB_AGAINST_PCT, cls.PB, cls.DPS,
        ]

    @classmethod
    def get_metric_by_key(cls, key: str) -> MetricDefinition:
        """Get metric definition by key."""
        for metric in cls.get_all_metrics():
            if metric.key == key:
                return metric
        raise ValueError(f"Unknown metric key: {key}")

    @classmethod
    def resolve(cls, key: str) -> MetricDefinition:
        """Get the registered definition, or a plain one for unregistered keys.

        Unregistered metrics still render: the label is the key itself,
        orientation defaults to higher-is-better and values are shown with
        plain string conversion.
        """
        try:
            return cls.get_metric_by_key(key)
        except ValueError:
            logger.debug(f"No formatter registered for metric '{key}', using plain conversion")
            return MetricDefinition(key=key, label=key)

    @classmethod
    def get_key_to_label_map(cls) -> Dict[str, str]:
        """Get mapping from metric keys to display labels."""
        return {metric.key: metric.label for metric in cls.get_all_metrics()}
