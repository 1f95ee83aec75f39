# tests/domain/test_percentile.py

"""
Unit tests for the rank-to-percentile conversion.
Covers orientation, endpoints, monotonicity, clamping and the documented examples.
"""

import logging
import pytest
from src.domain.percentile import percentile_of, oriented_rank
from src.domain.exceptions import ConfigValidationError


class TestPercentileEndpoints:
    """Test the best and worst ranks map to 100 and 0."""
    
    @pytest.mark.parametrize("total", [2, 3, 11, 32])
    def test_rank_one_is_100_when_higher_is_better(self, total):
        assert percentile_of(1, total, True) == 100
    
    @pytest.mark.parametrize("total", [2, 3, 11, 32])
    def test_last_rank_is_0_when_higher_is_better(self, total):
        assert percentile_of(total, total, True) == 0
    
    def test_lower_is_better_mirrors_endpoints(self):
        assert percentile_of(1, 11, False) == 0
        assert percentile_of(11, 11, False) == 100
    
    def test_default_orientation_is_higher_is_better(self):
        assert percentile_of(1, 11) == 100


class TestPercentileExamples:
    """Test the worked examples from the conference dataset."""
    
    def test_rank_two_of_eleven(self):
        assert percentile_of(2, 11, True) == pytest.approx(90.0)
    
    def test_pitching_era_rank_seven_lower_is_better(self):
        """ERA rank 7 of 11 flips to oriented rank 5 and lands above average."""
        assert oriented_rank(7, 11, False) == 5
        assert percentile_of(7, 11, False) == pytest.approx(60.0)
    
    def test_middle_of_odd_field_is_exactly_50(self):
        assert percentile_of(2, 3, True) == 50.0
        assert percentile_of(6, 11, False) == pytest.approx(50.0)


class TestPercentileMonotonicity:
    """Test percentiles move in the right direction as rank worsens."""
    
    @pytest.mark.parametrize("total", [2, 5, 11, 32])
    def test_non_increasing_when_higher_is_better(self, total):
        values = [percentile_of(rank, total, True) for rank in range(1, total + 1)]
        assert all(a >= b for a, b in zip(values, values[1:]))
    
    @pytest.mark.parametrize("total", [2, 5, 11, 32])
    def test_non_decreasing_when_lower_is_better(self, total):
        values = [percentile_of(rank, total, False) for rank in range(1, total + 1)]
        assert all(a <= b for a, b in zip(values, values[1:]))
    
    @pytest.mark.parametrize("total", [2, 7, 11])
    def test_always_within_bounds(self, total):
        for rank in range(1, total + 1):
            for higher in (True, False):
                assert 0 <= percentile_of(rank, total, higher) <= 100


class TestPercentileClamping:
    """Test malformed ranks are clamped and flagged, never raised."""
    
    def test_rank_zero_clamps_to_100(self):
        assert percentile_of(0, 11, True) == 100
    
    def test_rank_past_total_clamps_to_0(self):
        assert percentile_of(12, 11, True) == 0
    
    def test_lower_is_better_out_of_range_is_clamped(self):
        assert percentile_of(0, 11, False) == 0
        assert percentile_of(12, 11, False) == 100
    
    def test_out_of_range_rank_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.domain.percentile"):
            percentile_of(0, 11, True)
        assert "outside [1, 11]" in caplog.text
    
    def test_valid_rank_is_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.domain.percentile"):
            percentile_of(5, 11, True)
        assert caplog.text == ""


class TestPercentileValidation:
    """Test the competitor pool precondition."""
    
    def test_total_of_one_is_rejected(self):
        with pytest.raises(ConfigValidationError, match="total must be at least 2"):
            percentile_of(1, 1, True)
    
    def test_total_of_zero_is_rejected(self):
        with pytest.raises(ConfigValidationError, match="total must be at least 2"):
            percentile_of(1, 0, True)
    
    def test_non_integer_total_is_rejected(self):
        with pytest.raises(ConfigValidationError, match="total must be an integer"):
            percentile_of(1, 11.0, True)
