"""Engine layer enumerations.

Centralized location for all enums used in the risk engine.
"""

from enum import Enum


class MarketCondition(str, Enum):
    """Market regime used for the market risk score."""

    BULL = "bull"
    BEAR = "bear"
    SIDEWAYS = "sideways"
    VOLATILE = "volatile"


class RiskLevel(str, Enum):
    """Coarse risk band derived from the overall risk score."""

    MINIMAL = "minimal"  # below low_risk
    LOW = "low"  # low_risk .. medium_risk
    MEDIUM = "medium"  # medium_risk .. high_risk
    HIGH = "high"  # >= high_risk


class RecommendationType(str, Enum):
    """Recommendation action type."""

    REDUCE_EXPOSURE = "reduce_exposure"
    REBALANCE = "rebalance"
    DIVERSIFY = "diversify"
    HEDGE = "hedge"
    MONITOR = "monitor"


class Priority(str, Enum):
    """Recommendation priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AlertSeverity(str, Enum):
    """Alert severity."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class RiskAlertType(str, Enum):
    """Alert category."""

    IMPERMANENT_LOSS = "impermanent_loss"
    LIQUIDITY = "liquidity"
    VOLATILITY = "volatility"
    CONCENTRATION = "concentration"
    MARKET = "market"
