"""Impermanent loss analysis.

Current IL per position comes from, in order of preference:
1. A precomputed ``impermanent_loss_pct`` on the position
2. The constant-product formula on entry vs. current price
3. Zero (no price information)

Forward IL is projected with square-root-of-time scaling of the pair
volatility.
"""

from __future__ import annotations

import logging
import math

from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.risk import BreakEvenPrice, ImpermanentLossAnalysis, PredictedIL
from lp_risk.engine.risk.factors import DEFAULT_VOLATILITY

logger = logging.getLogger(__name__)

# Prediction horizons in days
ONE_DAY = 1
ONE_WEEK = 7
ONE_MONTH = 30

# Scale applied to volatility × √t in the IL projection
IL_PREDICTION_SCALE = 0.1

# Conservative worst-case IL floor, percent
WORST_CASE_IL_FLOOR = 25.0


def calc_impermanent_loss(entry_price: float, current_price: float) -> float:
    """Calculate impermanent loss of a full-range constant-product position.

    Formula: IL = |2·√r / (1 + r) − 1|, r = current_price / entry_price

    Physical meaning:
    - Value lost versus holding the two tokens, as a fraction
    - r = 1 (no divergence): IL = 0
    - r = 4 (price quadrupled): IL ≈ 0.20 (20%)

    Args:
        entry_price: Price of token_x in token_y at entry.
        current_price: Current price of token_x in token_y.

    Returns:
        IL as a positive fraction (0.0566 = 5.66%).
        Returns 0 if either price is non-positive.

    Example:
        >>> round(calc_impermanent_loss(100, 400), 4)
        0.2
    """
    if entry_price <= 0 or current_price <= 0:
        return 0.0

    ratio = current_price / entry_price
    il = 2 * math.sqrt(ratio) / (1 + ratio) - 1

    return abs(il)


def calc_position_il(position: LiquidityPosition) -> float:
    """Current IL of a single position, in percent."""
    if position.impermanent_loss_pct is not None:
        return max(float(position.impermanent_loss_pct), 0.0)

    if position.entry_price is not None and position.current_price is not None:
        return calc_impermanent_loss(position.entry_price, position.current_price) * 100

    return 0.0


def predict_il(volatility: float, days: float) -> float:
    """Project IL over a horizon with square-root-of-time scaling.

    Formula: IL(t) = volatility × √(t / 365) × 0.1

    Args:
        volatility: Annualized pair volatility as a decimal.
        days: Horizon in days.

    Returns:
        Projected IL as a fraction.

    Example:
        >>> round(predict_il(0.25, 365), 3)
        0.025
    """
    if days <= 0 or volatility <= 0:
        return 0.0
    return volatility * math.sqrt(days / 365) * IL_PREDICTION_SCALE


class ImpermanentLossAnalyzer:
    """Portfolio-level impermanent loss analysis."""

    def __init__(self, default_volatility: float = DEFAULT_VOLATILITY) -> None:
        """Initialize analyzer.

        Args:
            default_volatility: Volatility for pairs missing from the
                volatility map passed to analyze().
        """
        self.default_volatility = default_volatility

    def analyze(
        self,
        positions: list[LiquidityPosition],
        pair_volatilities: dict[str, float] | None = None,
    ) -> ImpermanentLossAnalysis:
        """Analyze current and projected IL, weighted by position value.

        Args:
            positions: Portfolio positions.
            pair_volatilities: pair_key -> annualized volatility.

        Returns:
            ImpermanentLossAnalysis. All zero when total value is 0.
        """
        pair_volatilities = pair_volatilities or {}

        total_value = 0.0
        weighted_il = 0.0
        weighted_day = 0.0
        weighted_week = 0.0
        weighted_month = 0.0

        for pos in positions:
            value = pos.value
            volatility = pair_volatilities.get(pos.pair_key, self.default_volatility)

            total_value += value
            weighted_il += calc_position_il(pos) * value
            weighted_day += predict_il(volatility, ONE_DAY) * value
            weighted_week += predict_il(volatility, ONE_WEEK) * value
            weighted_month += predict_il(volatility, ONE_MONTH) * value

        if total_value == 0:
            return ImpermanentLossAnalysis()

        current_il = weighted_il / total_value
        predicted_il = PredictedIL(
            one_day=weighted_day / total_value * 100,
            one_week=weighted_week / total_value * 100,
            one_month=weighted_month / total_value * 100,
        )
        worst_case_il = max(predicted_il.one_month * 2, WORST_CASE_IL_FLOOR)
        total_return = sum(pos.pnl for pos in positions)

        logger.debug(
            f"IL analysis: current={current_il:.2f}% "
            f"1d={predicted_il.one_day:.3f}% 1w={predicted_il.one_week:.3f}% "
            f"1m={predicted_il.one_month:.3f}%"
        )

        return ImpermanentLossAnalysis(
            current_il=current_il,
            predicted_il=predicted_il,
            worst_case_il=worst_case_il,
            # Needs a live price feed
            break_even_price=BreakEvenPrice(),
            risk_adjusted_return=total_return - current_il,
        )
