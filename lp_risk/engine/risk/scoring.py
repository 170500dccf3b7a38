"""Composite risk scoring.

Turns RiskFactors into bounded RiskMetrics. Every function here is pure and
deterministic.
"""

from lp_risk.engine.models.enums import MarketCondition
from lp_risk.engine.models.risk import RiskFactors, RiskMetrics

# Weights of the overall risk score. Must sum to 1.0: alert and
# recommendation thresholds are calibrated against this scale.
RISK_WEIGHTS: dict[str, float] = {
    "volatility_risk": 0.25,
    "liquidity_risk": 0.15,
    "concentration_risk": 0.20,
    "market_risk": 0.15,
    "time_horizon_risk": 0.10,
    "impermanent_loss_risk": 0.15,
}

MARKET_RISK_SCORES: dict[MarketCondition, float] = {
    MarketCondition.BULL: 30.0,
    MarketCondition.BEAR: 70.0,
    MarketCondition.SIDEWAYS: 40.0,
    MarketCondition.VOLATILE: 80.0,
}
DEFAULT_MARKET_RISK = 50.0

# (upper bound in days, score); risk falls as IL volatility smooths out
TIME_HORIZON_STEPS: list[tuple[float, float]] = [
    (1, 80.0),
    (7, 60.0),
    (30, 40.0),
    (90, 25.0),
]
LONG_HORIZON_RISK = 15.0

MAX_SCORE = 100.0


def calc_volatility_risk(volatility: float) -> float:
    """Volatility risk: min(volatility × 100, 100), floored at 0."""
    return min(max(volatility * 100, 0.0), MAX_SCORE)


def calc_liquidity_risk(liquidity_depth: float) -> float:
    """Liquidity risk: max(0, 100 − depth / 1000). $100k+ scores 0."""
    return min(max(0.0, MAX_SCORE - liquidity_depth / 1000), MAX_SCORE)


def calc_market_risk(conditions: MarketCondition | str) -> float:
    """Market risk from the regime lookup table (50 if unmapped)."""
    try:
        conditions = MarketCondition(conditions)
    except ValueError:
        return DEFAULT_MARKET_RISK
    return MARKET_RISK_SCORES.get(conditions, DEFAULT_MARKET_RISK)


def calc_time_horizon_risk(days: float) -> float:
    """Time horizon risk as a step function of mean holding days.

    <1d → 80, <7d → 60, <30d → 40, <90d → 25, else 15.
    """
    for upper_bound, score in TIME_HORIZON_STEPS:
        if days < upper_bound:
            return score
    return LONG_HORIZON_RISK


def calc_il_risk(volatility: float, correlation: float) -> float:
    """IL risk grows with volatility and falls with correlation.

    Formula: min(volatility × 100 + (1 − correlation) × 20, 100)
    """
    base_risk = volatility * 100
    correlation_adjustment = (1 - correlation) * 20
    return min(max(base_risk + correlation_adjustment, 0.0), MAX_SCORE)


def calc_overall_risk(sub_scores: dict[str, float]) -> float:
    """Weighted sum of sub-scores, clamped to [0, 100]."""
    total = sum(sub_scores[name] * weight for name, weight in RISK_WEIGHTS.items())
    return min(max(total, 0.0), MAX_SCORE)


def score(factors: RiskFactors) -> RiskMetrics:
    """Score risk factors into bounded risk metrics.

    Args:
        factors: Collected risk factors.

    Returns:
        RiskMetrics with every score in [0, 100].

    Example:
        >>> metrics = score(RiskFactors(price_volatility=0.25, liquidity_depth=100000,
        ...                             concentration_level=20, time_in_position=45,
        ...                             correlation_factor=0.3))
        >>> metrics.volatility_risk
        25.0
    """
    sub_scores = {
        "volatility_risk": calc_volatility_risk(factors.price_volatility),
        "liquidity_risk": calc_liquidity_risk(factors.liquidity_depth),
        "concentration_risk": min(max(factors.concentration_level, 0.0), MAX_SCORE),
        "market_risk": calc_market_risk(factors.market_conditions),
        "time_horizon_risk": calc_time_horizon_risk(factors.time_in_position),
        "impermanent_loss_risk": calc_il_risk(
            factors.price_volatility, factors.correlation_factor
        ),
    }

    return RiskMetrics(overall_risk_score=calc_overall_risk(sub_scores), **sub_scores)
