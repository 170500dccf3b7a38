"""Portfolio return statistics.

Portfolio-level module for statistics over per-position P&L percentages.
Inputs are in position order; every function returns 0 instead of None for
an empty sample so the assessment record stays fully numeric.
"""

import math

import numpy as np

# Standard deviations below this are treated as zero
_STD_EPSILON = 1e-12


def calc_sharpe_ratio(returns: list[float]) -> float:
    """Calculate the (unannualized) Sharpe ratio of a return sample.

    Formula: Sharpe = mean(returns) / population_std(returns)

    Args:
        returns: Per-position P&L percentages.

    Returns:
        Sharpe ratio. Returns 0 for an empty sample or zero dispersion.

    Example:
        >>> calc_sharpe_ratio([10, 10, 10])
        0.0
        >>> round(calc_sharpe_ratio([5, 15]), 2)
        2.0
    """
    if not returns:
        return 0.0

    returns_array = np.array(returns, dtype=float)
    mean_return = float(np.mean(returns_array))
    std_dev = float(np.std(returns_array))  # population std (ddof=0)

    if std_dev < _STD_EPSILON:
        return 0.0

    return mean_return / std_dev


def calc_max_drawdown(returns: list[float]) -> float:
    """Calculate the largest peak-to-trough decline of a return sequence.

    The running peak starts at 0, so a sequence that only falls from zero
    still registers its decline. Drawdown is measured in the same units as
    the input (percentage points).

    Args:
        returns: Per-position P&L percentages in position order.

    Returns:
        Maximum drawdown, floored at 0.

    Example:
        >>> calc_max_drawdown([10, 5, 20, -10])
        30.0
    """
    max_drawdown = 0.0
    peak = 0.0

    for value in returns:
        peak = max(peak, value)
        max_drawdown = max(max_drawdown, peak - value)

    return float(max_drawdown)


def calc_value_at_risk(
    returns: list[float],
    confidence: float = 0.95,
) -> float:
    """Calculate empirical Value at Risk.

    Sorts the sample ascending and returns the element at
    ``floor((1 - confidence) * n)``. Higher confidence picks an equal or
    lower (more conservative) element.

    Args:
        returns: Per-position P&L percentages.
        confidence: Confidence level (e.g., 0.95 for 95% VaR).

    Returns:
        The P&L percentage at the VaR index. Returns 0 for an empty sample.

    Example:
        >>> calc_value_at_risk([5, -10, 3, 8, -2], confidence=0.95)
        -10.0
    """
    if not returns:
        return 0.0

    sorted_returns = sorted(returns)
    index = math.floor((1 - confidence) * len(sorted_returns))
    index = min(max(index, 0), len(sorted_returns) - 1)

    return float(sorted_returns[index])
