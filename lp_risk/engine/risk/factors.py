"""Risk factor collection.

Derives the raw risk inputs (volatility, liquidity depth, position size,
holding time, market regime, correlation, concentration) from positions and
optional market data.

Volatility lookups are the only call into an external collaborator. They are
fanned out once per distinct token pair on a thread pool; a pair whose lookup
fails or misses the deadline gets the default volatility and the batch
carries on.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import datetime
from typing import Any

from lp_risk.data.providers.base import VolatilityProvider
from lp_risk.engine.models.enums import MarketCondition
from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.risk import RiskFactors
from lp_risk.engine.portfolio.risk_metrics import calc_concentration_risk, calc_total_value

logger = logging.getLogger(__name__)

# Fallback annualized volatility for a pair whose lookup failed
DEFAULT_VOLATILITY = 0.20

# Placeholder co-movement absent real cross-asset correlation data
DEFAULT_CORRELATION = 0.30

# Market regime classification from market data
VOLATILE_REGIME_VOLATILITY = 0.80
TREND_THRESHOLD = 0.05


def fetch_pair_volatilities(
    positions: list[LiquidityPosition],
    provider: VolatilityProvider,
    default_volatility: float = DEFAULT_VOLATILITY,
    lookup_timeout: float | None = 5.0,
    max_workers: int = 8,
) -> dict[str, float]:
    """Look up volatility for every distinct token pair concurrently.

    Args:
        positions: Positions whose pairs need a volatility estimate.
        provider: External volatility source.
        default_volatility: Value used when a lookup fails or times out.
        lookup_timeout: Seconds to wait for all lookups. None waits forever.
        max_workers: Thread pool size.

    Returns:
        Mapping of pair_key to annualized volatility. Every pair present in
        positions has an entry.
    """
    pairs: dict[str, tuple[str, str]] = {}
    for pos in positions:
        pairs.setdefault(pos.pair_key, (pos.token_x, pos.token_y))

    if not pairs:
        return {}

    volatilities: dict[str, float] = {}
    executor = ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(pairs))))
    try:
        futures = {
            executor.submit(provider.get_pair_volatility, token_a, token_b): pair_key
            for pair_key, (token_a, token_b) in pairs.items()
        }
        done, not_done = wait(futures, timeout=lookup_timeout)

        for future in done:
            pair_key = futures[future]
            try:
                volatility = float(future.result())
            except Exception as e:
                logger.warning(
                    f"Volatility lookup failed for {pair_key}: {e}, "
                    f"using default {default_volatility:.2f}"
                )
                volatilities[pair_key] = default_volatility
                continue

            if not math.isfinite(volatility) or volatility < 0:
                logger.warning(
                    f"Invalid volatility for {pair_key}: {volatility}, "
                    f"using default {default_volatility:.2f}"
                )
                volatility = default_volatility
            volatilities[pair_key] = volatility

        for future in not_done:
            pair_key = futures[future]
            logger.warning(
                f"Volatility lookup timed out for {pair_key} after {lookup_timeout}s, "
                f"using default {default_volatility:.2f}"
            )
            volatilities[pair_key] = default_volatility
    finally:
        # Do not block on lookups that missed the deadline
        executor.shutdown(wait=False, cancel_futures=True)

    return volatilities


def classify_market_conditions(market_data: dict[str, Any] | None) -> MarketCondition:
    """Classify the market regime from optional market data.

    Rules:
    - No market data -> SIDEWAYS
    - Explicit "market_condition" entry (bull/bear/sideways/volatile) wins
    - "volatility" >= 0.80 -> VOLATILE
    - "trend" > 0.05 -> BULL, "trend" < -0.05 -> BEAR
    - Otherwise SIDEWAYS

    Args:
        market_data: Optional mapping with "market_condition", "trend"
            (fractional price change) and/or "volatility" (annualized).

    Returns:
        MarketCondition
    """
    if not market_data:
        return MarketCondition.SIDEWAYS

    explicit = market_data.get("market_condition")
    if explicit is not None:
        try:
            return MarketCondition(str(getattr(explicit, "value", explicit)).lower())
        except ValueError:
            logger.warning(f"Unknown market_condition: {explicit}, classifying from data")

    volatility = _as_float(market_data.get("volatility"))
    if volatility is not None and volatility >= VOLATILE_REGIME_VOLATILITY:
        return MarketCondition.VOLATILE

    trend = _as_float(market_data.get("trend"))
    if trend is not None:
        if trend > TREND_THRESHOLD:
            return MarketCondition.BULL
        if trend < -TREND_THRESHOLD:
            return MarketCondition.BEAR

    return MarketCondition.SIDEWAYS


def calc_correlation_factor(market_data: dict[str, Any] | None) -> float:
    """Token-pair correlation, from market data when supplied.

    Returns:
        market_data["correlation"] clamped to [0, 1], else DEFAULT_CORRELATION.
    """
    if market_data:
        correlation = _as_float(market_data.get("correlation"))
        if correlation is not None:
            return min(max(correlation, 0.0), 1.0)
    return DEFAULT_CORRELATION


def calc_average_time_in_position(
    positions: list[LiquidityPosition],
    now: datetime,
) -> float:
    """Mean position age in days (missing created_at counts as 0 days)."""
    if not positions:
        return 0.0
    return sum(pos.age_days(now) for pos in positions) / len(positions)


def _as_float(value: Any) -> float | None:
    """Convert a market data entry to float, None if not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class RiskFactorCollector:
    """Collects RiskFactors for a portfolio.

    Example:
        >>> collector = RiskFactorCollector(StaticVolatilityProvider())
        >>> factors = collector.collect(positions)
        >>> factors.concentration_level
        100.0
    """

    def __init__(
        self,
        provider: VolatilityProvider,
        default_volatility: float = DEFAULT_VOLATILITY,
        lookup_timeout: float | None = 5.0,
        max_workers: int = 8,
    ) -> None:
        """Initialize collector.

        Args:
            provider: External volatility source.
            default_volatility: Per-pair fallback volatility.
            lookup_timeout: Deadline in seconds for the volatility fan-out.
            max_workers: Thread pool size for the fan-out.
        """
        self.provider = provider
        self.default_volatility = default_volatility
        self.lookup_timeout = lookup_timeout
        self.max_workers = max_workers

    def fetch_volatilities(self, positions: list[LiquidityPosition]) -> dict[str, float]:
        """Look up volatility for every distinct pair in positions."""
        return fetch_pair_volatilities(
            positions,
            self.provider,
            default_volatility=self.default_volatility,
            lookup_timeout=self.lookup_timeout,
            max_workers=self.max_workers,
        )

    def collect(
        self,
        positions: list[LiquidityPosition],
        market_data: dict[str, Any] | None = None,
        pair_volatilities: dict[str, float] | None = None,
        as_of: datetime | None = None,
    ) -> RiskFactors:
        """Collect risk factors.

        Args:
            positions: Portfolio positions.
            market_data: Optional market data (see classify_market_conditions).
            pair_volatilities: Precomputed pair_key -> volatility map. Looked
                up through the provider when None.
            as_of: Reference time for holding periods. Defaults to now.

        Returns:
            RiskFactors. All zero (sideways market) for an empty portfolio.
        """
        if not positions:
            return RiskFactors()

        if pair_volatilities is None:
            pair_volatilities = self.fetch_volatilities(positions)

        now = as_of or datetime.now()
        total_value = calc_total_value(positions)

        price_volatility = sum(
            pair_volatilities.get(pos.pair_key, self.default_volatility)
            for pos in positions
        ) / len(positions)

        return RiskFactors(
            price_volatility=price_volatility,
            liquidity_depth=total_value,
            position_size=total_value / len(positions),
            time_in_position=calc_average_time_in_position(positions, now),
            market_conditions=classify_market_conditions(market_data),
            correlation_factor=calc_correlation_factor(market_data),
            concentration_level=calc_concentration_risk(positions),
        )
