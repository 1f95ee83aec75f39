# tests/domain/test_services.py

"""
Unit tests for row derivation and section summaries.
"""

import dataclasses
import pytest
from src.domain.entities import MetricObservation, Row, Section
from src.domain.exceptions import ConfigValidationError
from src.domain.metrics import SavantMetrics
from src.domain.services import derive_row, derive_rows, summarize_rows


def make_row(key: str, percentile: float) -> Row:
    return Row(key=key, label=key, formatted_value=str(percentile), raw_value=percentile,
               rank=1, percentile=percentile, higher_is_better=True, above_average=percentile >= 50)


@pytest.fixture
def pitching_section():
    return Section.from_mappings(
        "Pitching",
        raw={'ERA': 5.68, 'WHIP': 1.59, 'FIP': 5.70, 'K': 411, 'BB': 202, 'HRAllowed': 47, 'BAVG': 0.285},
        ranks={'ERA': 7, 'WHIP': 6, 'FIP': 6, 'K': 8, 'BB': 3, 'HRAllowed': 6, 'BAVG': 7},
        better={'ERA': False, 'WHIP': False, 'FIP': False, 'K': True, 'BB': False,
                'HRAllowed': False, 'BAVG': False}
    )


class TestDeriveRows:
    """Test one row per metric, in declared order."""
    
    def test_rows_follow_declared_order(self, pitching_section):
        rows = derive_rows(pitching_section, 11)
        assert [row.key for row in rows] == ['ERA', 'WHIP', 'FIP', 'K', 'BB', 'HRAllowed', 'BAVG']
    
    def test_order_does_not_depend_on_percentile(self):
        section = Section.from_mappings("Offense", raw={'SBpct': 0.68, 'HR': 80, 'AVG': 0.279},
                                        ranks={'SBpct': 9, 'HR': 1, 'AVG': 7})
        rows = derive_rows(section, 11)
        assert [row.key for row in rows] == ['SBpct', 'HR', 'AVG']
    
    def test_era_row_matches_conference_example(self, pitching_section):
        era = derive_rows(pitching_section, 11)[0]
        assert era.label == 'ERA'
        assert era.formatted_value == '5.68'
        assert era.raw_value == 5.68
        assert era.rank == 7
        assert era.percentile == pytest.approx(60.0)
        assert era.higher_is_better is False
        assert era.above_average is True
        assert era.orientation_text == 'Lower is better'
    
    def test_pitching_percentiles(self, pitching_section):
        percentiles = [row.percentile for row in derive_rows(pitching_section, 11)]
        assert percentiles == pytest.approx([60, 50, 50, 30, 20, 50, 60])
    
    def test_formatting_per_metric(self, pitching_section):
        values = {row.key: row.formatted_value for row in derive_rows(pitching_section, 11)}
        assert values == {'ERA': '5.68', 'WHIP': '1.59', 'FIP': '5.70', 'K': '411',
                          'BB': '202', 'HRAllowed': '47', 'BAVG': '0.285'}
    
    def test_exactly_50_is_above_average(self):
        section = Section.from_mappings("Mid", raw={'HR': 40}, ranks={'HR': 2}, better={'HR': True})
        row = derive_rows(section, 3)[0]
        assert row.percentile == 50.0
        assert row.above_average is True
    
    def test_just_below_50_is_below_average(self):
        section = Section.from_mappings("Mid", raw={'HR': 40}, ranks={'HR': 6}, better={'HR': True})
        row = derive_rows(section, 10)[0]
        assert row.percentile < 50
        assert row.above_average is False
    
    def test_unregistered_metric_falls_back_to_plain_text(self):
        section = Section.from_mappings("Extra", raw={'xFIP': 4.25, 'Shutouts': 3.0},
                                        ranks={'xFIP': 2, 'Shutouts': 5})
        rows = derive_rows(section, 11)
        assert rows[0].label == 'xFIP'
        assert rows[0].formatted_value == '4.25'
        assert rows[1].formatted_value == '3'
        assert rows[0].higher_is_better is True
    
    def test_out_of_range_rank_is_clamped(self):
        section = Section.from_mappings("Typo", raw={'HR': 80}, ranks={'HR': 0})
        row = derive_rows(section, 11)[0]
        assert row.percentile == 100
    
    def test_idempotent(self, pitching_section):
        assert derive_rows(pitching_section, 11) == derive_rows(pitching_section, 11)
    
    def test_section_is_not_mutated(self, pitching_section):
        before = dataclasses.replace(pitching_section)
        derive_rows(pitching_section, 11)
        assert pitching_section == before
    
    def test_total_changes_percentiles(self, pitching_section):
        assert derive_rows(pitching_section, 11)[0].percentile != derive_rows(pitching_section, 13)[0].percentile


class TestDeriveRowDataErrors:
    """Test missing rank or orientation is a data error, not a default."""
    
    def test_missing_rank_raises(self):
        observation = MetricObservation(SavantMetrics.ERA, 5.68, None, False)
        with pytest.raises(ConfigValidationError, match="Metric 'ERA' has no rank"):
            derive_row(observation, 11)
    
    def test_missing_orientation_raises(self):
        observation = MetricObservation(SavantMetrics.ERA, 5.68, 7, None)
        with pytest.raises(ConfigValidationError, match="Metric 'ERA' has no orientation"):
            derive_row(observation, 11)


class TestSummarizeRows:
    """Test best, worst and upper-median aggregation."""
    
    def test_two_metric_example(self):
        section = Section.from_mappings("Pair", raw={'A': 1.0, 'B': 2.0}, ranks={'A': 1, 'B': 11},
                                        better={'A': True, 'B': True})
        summary = summarize_rows(derive_rows(section, 11))
        assert summary.best.key == 'A'
        assert summary.best.percentile == 100
        assert summary.worst.key == 'B'
        assert summary.worst.percentile == 0
        # Upper median of [0, 100] is index 1
        assert summary.median_percentile == 100
    
    def test_ties_go_to_first_row(self):
        rows = [make_row('A', 60), make_row('B', 20), make_row('C', 60), make_row('D', 20)]
        summary = summarize_rows(rows)
        assert summary.best.key == 'A'
        assert summary.worst.key == 'B'
    
    def test_upper_median_for_even_length(self):
        rows = [make_row(k, p) for k, p in zip('ABCD', [10, 40, 30, 90])]
        # Sorted [10, 30, 40, 90] -> index 2, not the averaged 35
        assert summarize_rows(rows).median_percentile == 40
    
    def test_median_for_odd_length(self):
        rows = [make_row(k, p) for k, p in zip('ABC', [80, 10, 50])]
        assert summarize_rows(rows).median_percentile == 50
    
    def test_single_row(self):
        row = make_row('A', 70)
        summary = summarize_rows([row])
        assert summary.best is row
        assert summary.worst is row
        assert summary.median_percentile == 70
    
    def test_pitching_summary(self, pitching_section):
        summary = summarize_rows(derive_rows(pitching_section, 11))
        assert summary.best.key == 'ERA'
        assert summary.worst.key == 'BB'
        assert summary.median_percentile == pytest.approx(50)
    
    def test_empty_rows_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            summarize_rows([])
