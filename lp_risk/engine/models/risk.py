"""Risk assessment data models.

This module defines the records produced by the engine layer. They are pure
data containers; all values are computed by the engine/business functions
and never mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from lp_risk.engine.models.enums import MarketCondition, Priority, RiskLevel

if TYPE_CHECKING:
    from lp_risk.business.monitoring.models import RiskAlert, RiskRecommendation


@dataclass(frozen=True)
class RiskFactors:
    """Raw risk inputs derived from positions and market data.

    Attributes:
        price_volatility: Mean annualized pair volatility (0.25 = 25%).
        liquidity_depth: Sum of position values in USD.
        position_size: Mean position value in USD.
        time_in_position: Mean holding time in days.
        market_conditions: Market regime.
        correlation_factor: Token-pair co-movement, 0-1.
        concentration_level: HHI of value shares scaled to 0-100.
    """

    price_volatility: float = 0.0
    liquidity_depth: float = 0.0
    position_size: float = 0.0
    time_in_position: float = 0.0
    market_conditions: MarketCondition = MarketCondition.SIDEWAYS
    correlation_factor: float = 0.0
    concentration_level: float = 0.0


@dataclass(frozen=True)
class RiskMetrics:
    """Bounded risk scores, each in [0, 100].

    overall_risk_score is the clamped weighted sum of the six sub-scores
    (see lp_risk.engine.risk.scoring.RISK_WEIGHTS).
    """

    overall_risk_score: float = 0.0
    impermanent_loss_risk: float = 0.0
    liquidity_risk: float = 0.0
    volatility_risk: float = 0.0
    concentration_risk: float = 0.0
    market_risk: float = 0.0
    time_horizon_risk: float = 0.0


@dataclass(frozen=True)
class PredictedIL:
    """Forward IL estimates in percent."""

    one_day: float = 0.0
    one_week: float = 0.0
    one_month: float = 0.0


@dataclass(frozen=True)
class BreakEvenPrice:
    """Per-token break-even price. Zero without a live price feed."""

    token_x: float = 0.0
    token_y: float = 0.0


@dataclass(frozen=True)
class ImpermanentLossAnalysis:
    """Portfolio impermanent-loss analysis.

    Attributes:
        current_il: Value-weighted current IL in percent.
        predicted_il: Value-weighted forward IL estimates in percent.
        worst_case_il: Conservative IL ceiling in percent.
        break_even_price: Placeholder break-even prices.
        risk_adjusted_return: Sum of position P&L percentages minus current IL.
    """

    current_il: float = 0.0
    predicted_il: PredictedIL = field(default_factory=PredictedIL)
    worst_case_il: float = 0.0
    break_even_price: BreakEvenPrice = field(default_factory=BreakEvenPrice)
    risk_adjusted_return: float = 0.0


@dataclass(frozen=True)
class PortfolioStatistics:
    """Summary statistics over per-position P&L percentages."""

    diversification_score: float = 0.0
    sharpe_ratio: float = 0.0
    max_drawdown: float = 0.0
    value_at_risk: float = 0.0


@dataclass(frozen=True)
class HistoricalRiskData:
    """Lightweight snapshot of an assessment for historical tracking."""

    date: datetime
    risk_score: float
    il_percentage: float
    portfolio_value: float
    volatility: float


@dataclass(frozen=True)
class PortfolioRiskAssessment:
    """Complete risk assessment of a portfolio.

    Built fresh by RiskAssessmentEngine.assess_portfolio_risk and never
    mutated afterwards.
    """

    total_value: float = 0.0
    risk_metrics: RiskMetrics = field(default_factory=RiskMetrics)
    risk_factors: RiskFactors = field(default_factory=RiskFactors)
    il_analysis: ImpermanentLossAnalysis = field(default_factory=ImpermanentLossAnalysis)
    recommendations: list[RiskRecommendation] = field(default_factory=list)
    alerts: list[RiskAlert] = field(default_factory=list)
    diversification_score: float = 0.0
    sharpe_ratio: float = 0.0
    max_drawdown: float = 0.0
    value_at_risk: float = 0.0
    risk_level: RiskLevel = RiskLevel.MINIMAL
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def summary(self) -> dict[str, Any]:
        """Flat summary for the presentation layer."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "total_value": self.total_value,
            "risk_level": self.risk_level.value,
            "overall_risk_score": self.risk_metrics.overall_risk_score,
            "current_il": self.il_analysis.current_il,
            "worst_case_il": self.il_analysis.worst_case_il,
            "diversification_score": self.diversification_score,
            "sharpe_ratio": self.sharpe_ratio,
            "max_drawdown": self.max_drawdown,
            "value_at_risk": self.value_at_risk,
            "recommendations": len(self.recommendations),
            "critical_recommendations": sum(
                1 for r in self.recommendations if r.priority == Priority.CRITICAL
            ),
            "alerts": len(self.alerts),
        }
