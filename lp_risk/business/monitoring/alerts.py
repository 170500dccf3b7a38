"""
Alert Engine - threshold-breach alerts

Three independent checks, each producing at most one alert:
- Current IL > critical_il → CRITICAL impermanent_loss
- Volatility risk > high_risk → WARNING volatility
- Concentration risk > max_concentration → WARNING concentration

Only threshold checks happen here; all values are computed by the engine layer.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from lp_risk.business.config.risk_config import RiskConfig, RiskThresholds
from lp_risk.business.monitoring.models import RiskAlert
from lp_risk.engine.models.enums import AlertSeverity, RiskAlertType, RiskLevel
from lp_risk.engine.models.risk import ImpermanentLossAnalysis, RiskMetrics

logger = logging.getLogger(__name__)


def make_alert_id(prefix: str, timestamp: datetime) -> str:
    """Alert id: ``<prefix>_<epoch ms>_<random suffix>``."""
    return f"{prefix}_{int(timestamp.timestamp() * 1000)}_{uuid.uuid4().hex[:8]}"


def classify_risk_level(score: float, thresholds: RiskThresholds) -> RiskLevel:
    """Risk band of an overall risk score.

    >= high_risk → HIGH, >= medium_risk → MEDIUM, >= low_risk → LOW, else MINIMAL.
    """
    if score >= thresholds.high_risk:
        return RiskLevel.HIGH
    if score >= thresholds.medium_risk:
        return RiskLevel.MEDIUM
    if score >= thresholds.low_risk:
        return RiskLevel.LOW
    return RiskLevel.MINIMAL


class AlertEngine:
    """Detects threshold breaches and emits severity-tagged alerts."""

    def __init__(self, config: RiskConfig) -> None:
        """
        Args:
            config: Risk configuration (thresholds read at call time)
        """
        self.config = config

    def alert(
        self,
        metrics: RiskMetrics,
        il_analysis: ImpermanentLossAnalysis,
        thresholds: RiskThresholds | None = None,
    ) -> list[RiskAlert]:
        """Evaluate alerts

        Args:
            metrics: Scored risk metrics
            il_analysis: IL analysis
            thresholds: Threshold snapshot; the config's current thresholds if None

        Returns:
            Alert list (0-3 entries)
        """
        thresholds = thresholds or self.config.thresholds
        now = datetime.now()
        alerts: list[RiskAlert] = []

        # Critical IL
        if il_analysis.current_il > thresholds.critical_il:
            alerts.append(RiskAlert(
                id=make_alert_id("il_critical", now),
                severity=AlertSeverity.CRITICAL,
                type=RiskAlertType.IMPERMANENT_LOSS,
                message=f"Critical impermanent loss detected: {il_analysis.current_il:.2f}%",
                threshold=thresholds.critical_il,
                current_value=il_analysis.current_il,
                timestamp=now,
            ))

        # High volatility
        if metrics.volatility_risk > thresholds.high_risk:
            alerts.append(RiskAlert(
                id=make_alert_id("volatility_high", now),
                severity=AlertSeverity.WARNING,
                type=RiskAlertType.VOLATILITY,
                message=f"High volatility risk detected: {metrics.volatility_risk:.1f}/100",
                threshold=thresholds.high_risk,
                current_value=metrics.volatility_risk,
                timestamp=now,
            ))

        # Concentration
        if metrics.concentration_risk > thresholds.max_concentration:
            alerts.append(RiskAlert(
                id=make_alert_id("concentration_high", now),
                severity=AlertSeverity.WARNING,
                type=RiskAlertType.CONCENTRATION,
                message=f"High concentration risk: {metrics.concentration_risk:.1f}%",
                threshold=thresholds.max_concentration,
                current_value=metrics.concentration_risk,
                timestamp=now,
            ))

        for a in alerts:
            logger.warning(f"[{a.severity.value.upper()}] {a.message}")

        return alerts
