"""Engine layer data models."""

from lp_risk.engine.models.enums import (
    AlertSeverity,
    MarketCondition,
    Priority,
    RecommendationType,
    RiskAlertType,
    RiskLevel,
)
from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.risk import (
    BreakEvenPrice,
    HistoricalRiskData,
    ImpermanentLossAnalysis,
    PortfolioRiskAssessment,
    PortfolioStatistics,
    PredictedIL,
    RiskFactors,
    RiskMetrics,
)
from lp_risk.engine.models.stress import (
    PositionStressResult,
    StressScenario,
    StressTestResult,
)

__all__ = [
    # Enums
    "AlertSeverity",
    "MarketCondition",
    "Priority",
    "RecommendationType",
    "RiskAlertType",
    "RiskLevel",
    # Position
    "LiquidityPosition",
    # Risk records
    "BreakEvenPrice",
    "HistoricalRiskData",
    "ImpermanentLossAnalysis",
    "PortfolioRiskAssessment",
    "PortfolioStatistics",
    "PredictedIL",
    "RiskFactors",
    "RiskMetrics",
    # Stress testing
    "PositionStressResult",
    "StressScenario",
    "StressTestResult",
]
