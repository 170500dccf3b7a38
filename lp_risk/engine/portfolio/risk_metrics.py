"""Portfolio composition risk metrics.

Portfolio-level module for metrics that operate on list[LiquidityPosition].
"""

from lp_risk.engine.models.position import LiquidityPosition


def calc_total_value(positions: list[LiquidityPosition]) -> float:
    """Sum of position values in USD (malformed values read as 0)."""
    return sum(pos.value for pos in positions)


def calc_concentration_risk(positions: list[LiquidityPosition]) -> float:
    """Calculate position concentration using the Herfindahl-Hirschman Index.

    Uses USD value as the weight measure.

    Formula: concentration = 100 × Σ(weight²) where weight = value / total

    Physical meaning:
    - 100: All value in a single position (maximum concentration)
    - 50: Two equal positions
    - 100/n: n equal positions

    Args:
        positions: List of LiquidityPosition objects.

    Returns:
        Concentration level in [0, 100].
        Returns 0 for an empty portfolio or zero total value.

    Example:
        # Five positions of $20,000 each
        # HHI = 5 × 0.2² = 0.2 -> 20
    """
    if not positions:
        return 0.0

    total = calc_total_value(positions)
    if total == 0:
        return 0.0

    hhi = sum((pos.value / total) ** 2 for pos in positions)

    return hhi * 100


def calc_diversification_score(positions: list[LiquidityPosition]) -> float:
    """Calculate diversification as the share of distinct token pairs.

    Formula: score = min(100, 100 × unique_pairs / n_positions)

    Args:
        positions: List of LiquidityPosition objects.

    Returns:
        Diversification score in [0, 100]. Returns 0 for an empty portfolio.

    Example:
        # SOL-USDC, SOL-USDC, JUP-USDC -> 2 unique pairs / 3 positions
        # score = 66.7
    """
    if not positions:
        return 0.0

    unique_pairs = {pos.pair_key for pos in positions}

    return min(100.0, 100.0 * len(unique_pairs) / len(positions))
