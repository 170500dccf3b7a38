"""Historical volatility calculation for token-pair price series."""

import math

import numpy as np

# Crypto markets trade every day of the year
DAYS_PER_YEAR = 365


def calc_log_returns(prices: list[float]) -> list[float] | None:
    """Calculate log returns from a price series.

    Args:
        prices: List of prices (oldest to newest).

    Returns:
        List of log returns, one shorter than prices.
        Returns None if any price is non-positive or non-finite.
    """
    returns = []
    for i in range(1, len(prices)):
        if not (math.isfinite(prices[i - 1]) and math.isfinite(prices[i])):
            return None
        if prices[i - 1] <= 0 or prices[i] <= 0:
            return None
        returns.append(math.log(prices[i] / prices[i - 1]))
    return returns


def calc_hv(
    prices: list[float],
    window: int | None = None,
    annualize: bool = True,
    periods_per_year: int = DAYS_PER_YEAR,
) -> float | None:
    """Calculate historical volatility from a price series.

    Uses the sample standard deviation of log returns.

    Args:
        prices: List of prices (oldest to newest), one per period.
        window: Number of most recent returns to use. None uses all.
        annualize: Whether to annualize the volatility. Default True.
        periods_per_year: Periods per year for annualization. Default 365.

    Returns:
        Historical volatility as a decimal (e.g., 0.25 for 25%).
        Returns None if insufficient or invalid data.

    Example:
        >>> prices = [100, 102, 101, 103, 105, 104, 106]
        >>> hv = calc_hv(prices)
        >>> 0.1 < hv < 1.0
        True
    """
    if prices is None or len(prices) < 3:
        return None

    if window is not None:
        if len(prices) < window + 1:
            return None
        prices = prices[-(window + 1) :]

    log_returns = calc_log_returns(prices)
    if log_returns is None or len(log_returns) < 2:
        return None

    std_dev = np.std(np.array(log_returns), ddof=1)

    if annualize:
        return float(std_dev * math.sqrt(periods_per_year))
    return float(std_dev)
