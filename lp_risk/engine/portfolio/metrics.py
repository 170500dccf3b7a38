"""Portfolio statistics - unified entry point.

Example:
    >>> from lp_risk.engine.portfolio.metrics import calc_portfolio_statistics
    >>> stats = calc_portfolio_statistics(positions)
    >>> print(f"Sharpe: {stats.sharpe_ratio:.2f}")
"""

from __future__ import annotations

from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.risk import PortfolioStatistics
from lp_risk.engine.portfolio.returns import (
    calc_max_drawdown,
    calc_sharpe_ratio,
    calc_value_at_risk,
)
from lp_risk.engine.portfolio.risk_metrics import calc_diversification_score


def calc_portfolio_statistics(
    positions: list[LiquidityPosition],
    var_confidence: float = 0.95,
) -> PortfolioStatistics:
    """Calculate the four portfolio summary statistics.

    Args:
        positions: List of LiquidityPosition objects.
        var_confidence: Confidence level for Value at Risk.

    Returns:
        PortfolioStatistics with all values. All zero for an empty portfolio.
    """
    if not positions:
        return PortfolioStatistics()

    returns = [pos.pnl for pos in positions]

    return PortfolioStatistics(
        diversification_score=calc_diversification_score(positions),
        sharpe_ratio=calc_sharpe_ratio(returns),
        max_drawdown=calc_max_drawdown(returns),
        value_at_risk=calc_value_at_risk(returns, var_confidence),
    )
