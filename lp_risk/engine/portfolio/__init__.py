"""Portfolio-level calculations.

- risk_metrics: Composition risk (total value, HHI concentration, diversification)
- returns: Return statistics (Sharpe, max drawdown, VaR)
- metrics: Unified statistics entry point (calc_portfolio_statistics)
"""

from lp_risk.engine.portfolio.metrics import calc_portfolio_statistics
from lp_risk.engine.portfolio.returns import (
    calc_max_drawdown,
    calc_sharpe_ratio,
    calc_value_at_risk,
)
from lp_risk.engine.portfolio.risk_metrics import (
    calc_concentration_risk,
    calc_diversification_score,
    calc_total_value,
)

__all__ = [
    # Unified entry point
    "calc_portfolio_statistics",
    # Composition
    "calc_total_value",
    "calc_concentration_risk",
    "calc_diversification_score",
    # Returns
    "calc_sharpe_ratio",
    "calc_max_drawdown",
    "calc_value_at_risk",
]
