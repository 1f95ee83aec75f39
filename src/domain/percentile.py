# src/domain/percentile.py - Rank to percentile conversion

import logging
from .validation import SavantValidator

logger = logging.getLogger(__name__)


def oriented_rank(rank: int, total: int, higher_is_better: bool) -> int:
    """Flip a "fewest is best" rank onto the "most is best" scale."""
    return rank if higher_is_better else total - rank + 1


def percentile_of(rank: int, total: int, higher_is_better: bool = True) -> float:
    """Convert a conference rank into a percentile in [0, 100].
    
    Linear interpolation across the whole field: rank 1 of N maps to 100
    and rank N maps to 0 for higher-is-better metrics, mirrored for
    lower-is-better ones. This is an approximation, not a statistical
    percentile rank: it ignores ties and the metric's actual distribution.
    
    Args:
        rank: 1-based conference rank as published
        total: Number of competitors in the pool (at least 2)
        higher_is_better: Orientation of the underlying metric
        
    Returns:
        Percentile clamped to [0, 100]. Out-of-range ranks are logged as
        data anomalies and clamped rather than raised.
        
    Example:
        percentile_of(7, 11, higher_is_better=False)  # ERA rank 7 -> 60.0
    """
    total = SavantValidator.validate_total_competitors(total, "total")
    
    if not 1 <= rank <= total:
        logger.warning(f"Rank {rank} outside [1, {total}], clamping percentile")
    
    oriented = oriented_rank(rank, total, higher_is_better)
    pct = ((total - oriented) / (total - 1)) * 100
    return max(0.0, min(100.0, pct))
