"""Recommendation Engine - risk metrics to actionable recommendations

Each rule compares one RiskMetrics score against one RiskThresholds value and
is evaluated independently; any number of rules may fire.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lp_risk.business.config.risk_config import RiskConfig, RiskThresholds
from lp_risk.business.monitoring.models import RiskRecommendation
from lp_risk.engine.models.enums import Priority, RecommendationType
from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.risk import RiskMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationRule:
    """Fires when getattr(metrics, metric) > getattr(thresholds, threshold)."""

    metric: str
    threshold: str
    type: RecommendationType
    priority: Priority
    description: str
    action_items: tuple[str, ...]
    expected_impact: float
    estimated_cost: float


# =============================================================================
# RECOMMENDATION_RULES
# Mapping: RiskMetrics field > RiskThresholds field → recommendation
# =============================================================================

RECOMMENDATION_RULES: list[RecommendationRule] = [
    RecommendationRule(
        metric="overall_risk_score",
        threshold="high_risk",
        type=RecommendationType.REDUCE_EXPOSURE,
        priority=Priority.HIGH,
        description="Portfolio risk is elevated. Consider reducing overall exposure.",
        action_items=(
            "Remove liquidity from highest-risk positions",
            "Diversify across different token pairs",
            "Consider reducing position sizes",
        ),
        expected_impact=25,
        estimated_cost=50,
    ),
    RecommendationRule(
        metric="impermanent_loss_risk",
        threshold="critical_il",
        type=RecommendationType.HEDGE,
        priority=Priority.CRITICAL,
        description="High impermanent loss risk detected.",
        action_items=(
            "Consider hedging strategies",
            "Narrow price ranges for volatile pairs",
            "Monitor positions more frequently",
        ),
        expected_impact=30,
        estimated_cost=75,
    ),
    RecommendationRule(
        metric="concentration_risk",
        threshold="max_concentration",
        type=RecommendationType.DIVERSIFY,
        priority=Priority.MEDIUM,
        description="Portfolio is too concentrated in specific tokens.",
        action_items=(
            "Add positions in different token pairs",
            "Reduce largest position sizes",
            "Consider correlation between tokens",
        ),
        expected_impact=20,
        estimated_cost=100,
    ),
    RecommendationRule(
        metric="liquidity_risk",
        threshold="medium_risk",
        type=RecommendationType.MONITOR,
        priority=Priority.MEDIUM,
        description="Some positions have low liquidity.",
        action_items=(
            "Monitor liquidity levels closely",
            "Consider moving to higher liquidity pools",
            "Set up liquidity alerts",
        ),
        expected_impact=15,
        estimated_cost=25,
    ),
]


class RecommendationEngine:
    """Maps risk metrics to prioritized recommendations."""

    def __init__(self, config: RiskConfig) -> None:
        """
        Args:
            config: Risk configuration (thresholds read at call time)
        """
        self.config = config

    def recommend(
        self,
        metrics: RiskMetrics,
        positions: list[LiquidityPosition],
        thresholds: RiskThresholds | None = None,
    ) -> list[RiskRecommendation]:
        """Generate recommendations

        Args:
            metrics: Scored risk metrics
            positions: Portfolio positions (context for logging)
            thresholds: Threshold snapshot; the config's current thresholds if None

        Returns:
            Recommendations in rule order, possibly empty
        """
        thresholds = thresholds or self.config.thresholds
        recommendations: list[RiskRecommendation] = []

        for rule in RECOMMENDATION_RULES:
            value = getattr(metrics, rule.metric)
            limit = getattr(thresholds, rule.threshold)
            if value > limit:
                logger.debug(
                    f"Recommendation {rule.type.value}: {rule.metric}={value:.2f} > "
                    f"{rule.threshold}={limit}"
                )
                recommendations.append(
                    RiskRecommendation(
                        type=rule.type,
                        priority=rule.priority,
                        description=rule.description,
                        action_items=list(rule.action_items),
                        expected_impact=rule.expected_impact,
                        estimated_cost=rule.estimated_cost,
                    )
                )

        if recommendations:
            logger.info(
                f"{len(recommendations)} recommendation(s) for {len(positions)} position(s)"
            )

        return recommendations
