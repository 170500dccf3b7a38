"""
Risk Assessment Pipeline - public entry point of the risk engine

Sequences the engine and business components:
1. Volatility lookups (concurrent, per-pair fallback)
2. Risk factors
3. Risk scoring
4. Impermanent loss analysis
5. Portfolio statistics
6. Recommendations and alerts

Usage:
    engine = RiskAssessmentEngine(config, volatility_provider)
    assessment = engine.assess_portfolio_risk(positions, market_data)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from lp_risk.business.config.risk_config import RiskConfig, RiskThresholds
from lp_risk.business.monitoring.alerts import AlertEngine, classify_risk_level
from lp_risk.business.monitoring.recommendations import RecommendationEngine
from lp_risk.data.providers.base import VolatilityProvider
from lp_risk.data.providers.static_provider import StaticVolatilityProvider
from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.risk import HistoricalRiskData, PortfolioRiskAssessment
from lp_risk.engine.models.stress import StressTestResult
from lp_risk.engine.portfolio.metrics import calc_portfolio_statistics
from lp_risk.engine.portfolio.risk_metrics import calc_total_value
from lp_risk.engine.risk.factors import RiskFactorCollector
from lp_risk.engine.risk.impermanent_loss import ImpermanentLossAnalyzer
from lp_risk.engine.risk.scoring import score
from lp_risk.engine.risk.stress import run_all_stress_tests, run_stress_test

logger = logging.getLogger(__name__)


class RiskAssessmentEngine:
    """Risk assessment orchestrator

    Stateless between calls except for the thresholds held by its RiskConfig.
    Each assessment reads one thresholds snapshot at call start, so a
    concurrent update_risk_thresholds() only affects later calls.
    """

    def __init__(
        self,
        config: Optional[RiskConfig] = None,
        volatility_provider: Optional[VolatilityProvider] = None,
    ) -> None:
        """
        Args:
            config: Risk configuration; RiskConfig.load() if None
            volatility_provider: Volatility source; StaticVolatilityProvider if None
        """
        self.config = config or RiskConfig.load()
        self.volatility_provider = volatility_provider or StaticVolatilityProvider()

        self.collector = RiskFactorCollector(
            self.volatility_provider,
            default_volatility=self.config.volatility.default,
            lookup_timeout=self.config.volatility.lookup_timeout,
            max_workers=self.config.volatility.max_workers,
        )
        self.il_analyzer = ImpermanentLossAnalyzer(
            default_volatility=self.config.volatility.default,
        )
        self.recommendation_engine = RecommendationEngine(self.config)
        self.alert_engine = AlertEngine(self.config)

        logger.info(f"Risk assessment engine initialized (volatility: {self.volatility_provider.name})")

    def assess_portfolio_risk(
        self,
        positions: list[LiquidityPosition],
        market_data: Optional[dict[str, Any]] = None,
        as_of: Optional[datetime] = None,
    ) -> PortfolioRiskAssessment:
        """Assess portfolio risk

        Never raises: an empty portfolio or an unexpected internal error both
        yield the zeroed assessment.

        Args:
            positions: Position snapshots (not mutated)
            market_data: Optional market data (market_condition, trend,
                volatility, correlation)
            as_of: Reference time for holding periods; now if None

        Returns:
            PortfolioRiskAssessment
        """
        if not positions:
            logger.info("Empty portfolio, returning zeroed assessment")
            return self._empty_assessment()

        try:
            return self._assess(list(positions), market_data, as_of)
        except Exception:
            logger.exception("Error assessing portfolio risk, returning zeroed assessment")
            return self._empty_assessment()

    def _assess(
        self,
        positions: list[LiquidityPosition],
        market_data: Optional[dict[str, Any]],
        as_of: Optional[datetime],
    ) -> PortfolioRiskAssessment:
        logger.info(f"Assessing risk: {len(positions)} position(s)")
        start_time = datetime.now()
        thresholds = self.config.thresholds

        # 1. Volatility lookups, shared by factors and IL analysis
        pair_volatilities = self.collector.fetch_volatilities(positions)

        # 2. Risk factors
        factors = self.collector.collect(
            positions,
            market_data=market_data,
            pair_volatilities=pair_volatilities,
            as_of=as_of,
        )
        logger.debug(f"Risk factors: {factors}")

        # 3. Scoring
        metrics = score(factors)
        logger.debug(f"Risk metrics: {metrics}")

        # 4. Impermanent loss
        il_analysis = self.il_analyzer.analyze(positions, pair_volatilities)

        # 5. Statistics
        stats = calc_portfolio_statistics(
            positions,
            var_confidence=self.config.statistics.var_confidence,
        )

        # 6. Recommendations and alerts
        recommendations = self.recommendation_engine.recommend(metrics, positions, thresholds)
        alerts = self.alert_engine.alert(metrics, il_analysis, thresholds)

        assessment = PortfolioRiskAssessment(
            total_value=calc_total_value(positions),
            risk_metrics=metrics,
            risk_factors=factors,
            il_analysis=il_analysis,
            recommendations=recommendations,
            alerts=alerts,
            diversification_score=stats.diversification_score,
            sharpe_ratio=stats.sharpe_ratio,
            max_drawdown=stats.max_drawdown,
            value_at_risk=stats.value_at_risk,
            risk_level=classify_risk_level(metrics.overall_risk_score, thresholds),
        )

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(
            f"Assessment done in {elapsed:.3f}s: score={metrics.overall_risk_score:.1f} "
            f"level={assessment.risk_level.value} "
            f"recommendations={len(recommendations)} alerts={len(alerts)}"
        )
        return assessment

    @staticmethod
    def _empty_assessment() -> PortfolioRiskAssessment:
        """Zeroed assessment of an empty portfolio."""
        return PortfolioRiskAssessment()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def get_risk_thresholds(self) -> RiskThresholds:
        """Current thresholds (immutable)."""
        return self.config.thresholds

    def update_risk_thresholds(
        self,
        partial: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> RiskThresholds:
        """Merge a partial threshold update; affects future calls only.

        Args:
            partial: Threshold name -> value
            **kwargs: Same, as keyword arguments

        Returns:
            The new thresholds

        Raises:
            RiskConfigError: Unknown name or invalid value
        """
        updates = {**(partial or {}), **kwargs}
        return self.config.update_thresholds(updates)

    # ------------------------------------------------------------------
    # History and stress tests
    # ------------------------------------------------------------------

    @staticmethod
    def track_historical_risk(assessment: PortfolioRiskAssessment) -> HistoricalRiskData:
        """Snapshot an assessment for historical tracking (no side effects)."""
        return HistoricalRiskData(
            date=datetime.now(),
            risk_score=assessment.risk_metrics.overall_risk_score,
            il_percentage=assessment.il_analysis.current_il,
            portfolio_value=assessment.total_value,
            volatility=assessment.risk_factors.price_volatility,
        )

    @staticmethod
    def run_stress_test(
        positions: list[LiquidityPosition],
        scenario_id: str,
    ) -> StressTestResult:
        """Apply one stress scenario (KeyError if unknown)."""
        return run_stress_test(positions, scenario_id)

    @staticmethod
    def run_all_stress_tests(positions: list[LiquidityPosition]) -> list[StressTestResult]:
        """Apply every stress scenario."""
        return run_all_stress_tests(positions)
