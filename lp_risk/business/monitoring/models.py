"""
Monitoring Models - recommendation and alert records

- RiskRecommendation: actionable recommendation
- RiskAlert: threshold-breach alert
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from lp_risk.engine.models.enums import (
    AlertSeverity,
    Priority,
    RecommendationType,
    RiskAlertType,
)


@dataclass(frozen=True)
class RiskRecommendation:
    """Risk recommendation"""

    type: RecommendationType
    priority: Priority
    description: str
    action_items: list[str] = field(default_factory=list)

    # Heuristic calibration constants
    expected_impact: float = 0.0  # expected risk reduction, %
    estimated_cost: float = 0.0  # USD


@dataclass(frozen=True)
class RiskAlert:
    """Risk alert

    acknowledged is owned by the consumer; the engine always emits False.
    """

    id: str
    severity: AlertSeverity
    type: RiskAlertType
    message: str
    threshold: float
    current_value: float
    timestamp: datetime = field(default_factory=datetime.now)
    acknowledged: bool = False
