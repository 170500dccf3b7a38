"""
Risk Monitoring Module

- RiskAssessmentEngine: assessment pipeline (public entry point)
- RecommendationEngine: metrics → recommendations
- AlertEngine: metrics → alerts
"""

from lp_risk.business.monitoring.alerts import AlertEngine, classify_risk_level
from lp_risk.business.monitoring.models import RiskAlert, RiskRecommendation
from lp_risk.business.monitoring.pipeline import RiskAssessmentEngine
from lp_risk.business.monitoring.recommendations import (
    RECOMMENDATION_RULES,
    RecommendationEngine,
)

__all__ = [
    "AlertEngine",
    "RecommendationEngine",
    "RiskAssessmentEngine",
    "RiskAlert",
    "RiskRecommendation",
    "RECOMMENDATION_RULES",
    "classify_risk_level",
]
