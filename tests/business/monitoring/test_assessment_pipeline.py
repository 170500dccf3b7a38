"""Tests for the end-to-end risk assessment pipeline."""

import math

import pytest

from lp_risk.business.config import RiskConfig, RiskConfigError
from lp_risk.business.monitoring import RiskAssessmentEngine
from lp_risk.data.providers import StaticVolatilityProvider
from lp_risk.engine.models import (
    MarketCondition,
    PortfolioRiskAssessment,
    Priority,
    RecommendationType,
    RiskAlertType,
    RiskLevel,
)


@pytest.fixture
def engine() -> RiskAssessmentEngine:
    """Engine with default thresholds and a flat 25% volatility."""
    return RiskAssessmentEngine(RiskConfig(), StaticVolatilityProvider(0.25))


class TestEmptyPortfolio:
    def test_zeroed_assessment(self, engine):
        assessment = engine.assess_portfolio_risk([])
        assert assessment.total_value == 0
        assert assessment.risk_metrics.overall_risk_score == 0
        assert assessment.il_analysis.current_il == 0
        assert assessment.risk_factors.market_conditions == MarketCondition.SIDEWAYS
        assert assessment.recommendations == []
        assert assessment.alerts == []
        assert assessment.risk_level == RiskLevel.MINIMAL


class TestSinglePosition:
    """One $100k SOL-USDC position held 45 days."""

    def test_assessment(self, engine, make_position, as_of):
        assessment = engine.assess_portfolio_risk(
            [make_position(total_value=100000)], as_of=as_of
        )
        metrics = assessment.risk_metrics

        assert assessment.total_value == 100000
        assert metrics.concentration_risk == pytest.approx(100.0)
        assert metrics.volatility_risk == pytest.approx(25.0)
        assert metrics.liquidity_risk == 0.0
        assert metrics.time_horizon_risk == 25.0
        # 0.25·25 + 0.20·100 + 0.15·40 + 0.10·25 + 0.15·39
        assert metrics.overall_risk_score == pytest.approx(40.6)
        assert assessment.risk_level == RiskLevel.MEDIUM
        assert assessment.diversification_score == 100.0

        assert [r.type for r in assessment.recommendations] == [
            RecommendationType.HEDGE,
            RecommendationType.DIVERSIFY,
        ]
        diversify = assessment.recommendations[1]
        assert diversify.priority == Priority.MEDIUM
        assert diversify.expected_impact == 20
        assert [a.type for a in assessment.alerts] == [RiskAlertType.CONCENTRATION]


class TestDiversifiedPortfolio:
    """Five $20k positions in five distinct pairs."""

    def test_assessment(self, engine, diversified_positions, as_of):
        assessment = engine.assess_portfolio_risk(diversified_positions, as_of=as_of)

        assert assessment.total_value == 100000
        assert assessment.risk_metrics.concentration_risk == pytest.approx(20.0)
        assert assessment.diversification_score == 100.0
        assert assessment.risk_metrics.overall_risk_score == pytest.approx(24.6)
        assert assessment.risk_level == RiskLevel.LOW
        assert [r.type for r in assessment.recommendations] == [RecommendationType.HEDGE]
        assert assessment.alerts == []

        # pnl [4, -2, 7.5, 1, -3.5]
        assert assessment.max_drawdown == pytest.approx(11.0)
        assert assessment.value_at_risk == pytest.approx(-3.5)
        assert assessment.sharpe_ratio > 0

    def test_summary(self, engine, diversified_positions, as_of):
        summary = engine.assess_portfolio_risk(diversified_positions, as_of=as_of).summary
        assert summary["risk_level"] == "low"
        assert summary["total_value"] == 100000
        assert summary["recommendations"] == 1
        assert summary["critical_recommendations"] == 1  # hedge
        assert summary["alerts"] == 0

    def test_idempotent(self, engine, diversified_positions, as_of):
        first = engine.assess_portfolio_risk(diversified_positions, as_of=as_of)
        second = engine.assess_portfolio_risk(diversified_positions, as_of=as_of)

        assert first.risk_metrics == second.risk_metrics
        assert first.risk_factors == second.risk_factors
        assert first.il_analysis == second.il_analysis
        assert first.recommendations == second.recommendations
        assert [a.message for a in first.alerts] == [a.message for a in second.alerts]

    def test_inputs_not_mutated(self, engine, diversified_positions, as_of):
        snapshot = list(diversified_positions)
        engine.assess_portfolio_risk(diversified_positions, as_of=as_of)
        assert diversified_positions == snapshot

    def test_market_data(self, engine, diversified_positions, as_of):
        assessment = engine.assess_portfolio_risk(
            diversified_positions, market_data={"market_condition": "volatile"}, as_of=as_of
        )
        assert assessment.risk_factors.market_conditions == MarketCondition.VOLATILE
        assert assessment.risk_metrics.market_risk == 80.0


class TestFailureHandling:
    """Tests for collaborator and internal failures."""

    def test_failing_provider_uses_default(self, make_position, as_of, failing_provider_cls):
        engine = RiskAssessmentEngine(RiskConfig(), failing_provider_cls(failing=None))
        assessment = engine.assess_portfolio_risk([make_position()], as_of=as_of)
        assert assessment.risk_factors.price_volatility == pytest.approx(0.20)
        assert assessment.risk_metrics.volatility_risk == pytest.approx(20.0)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_volatility_stays_bounded(self, make_position, as_of, bad):
        engine = RiskAssessmentEngine(RiskConfig(), StaticVolatilityProvider(bad))
        assessment = engine.assess_portfolio_risk([make_position()], as_of=as_of)
        metrics = assessment.risk_metrics

        assert assessment.risk_factors.price_volatility == pytest.approx(0.20)
        assert 0 <= metrics.overall_risk_score <= 100
        assert math.isfinite(assessment.il_analysis.predicted_il.one_month)
        assert assessment.il_analysis.worst_case_il == pytest.approx(25.0)

    def test_partial_provider_failure(self, make_position, as_of, failing_provider_cls):
        provider = failing_provider_cls(failing={("JUP", "USDC")}, volatility=0.6)
        engine = RiskAssessmentEngine(RiskConfig(), provider)
        positions = [make_position("SOL", "USDC"), make_position("JUP", "USDC")]
        assessment = engine.assess_portfolio_risk(positions, as_of=as_of)
        # (0.6 + 0.2) / 2
        assert assessment.risk_factors.price_volatility == pytest.approx(0.40)

    def test_internal_error_returns_zeroed(self, engine, make_position, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(engine.il_analyzer, "analyze", boom)
        assessment = engine.assess_portfolio_risk([make_position()])
        assert isinstance(assessment, PortfolioRiskAssessment)
        assert assessment.total_value == 0
        assert assessment.recommendations == []


class TestThresholdManagement:
    """Tests for get/update of risk thresholds."""

    def test_get_defaults(self, engine):
        assert engine.get_risk_thresholds().high_risk == 70.0

    def test_update_affects_later_assessments(self, engine, make_position, as_of):
        positions = [make_position(total_value=100000)]
        before = engine.assess_portfolio_risk(positions, as_of=as_of)

        updated = engine.update_risk_thresholds(max_concentration=100)
        assert updated.max_concentration == 100.0
        assert engine.get_risk_thresholds().max_concentration == 100.0

        after = engine.assess_portfolio_risk(positions, as_of=as_of)
        assert RiskAlertType.CONCENTRATION in [a.type for a in before.alerts]
        assert after.alerts == []

    def test_update_with_mapping(self, engine):
        updated = engine.update_risk_thresholds({"critical_il": 12, "low_risk": 25})
        assert updated.critical_il == 12.0
        assert updated.low_risk == 25.0
        assert updated.high_risk == 70.0

    def test_invalid_update_rejected(self, engine):
        with pytest.raises(RiskConfigError):
            engine.update_risk_thresholds(high_risk=-10)
        assert engine.get_risk_thresholds().high_risk == 70.0


class TestHistoryAndStress:
    def test_track_historical_risk(self, engine, diversified_positions, as_of):
        assessment = engine.assess_portfolio_risk(diversified_positions, as_of=as_of)
        record = engine.track_historical_risk(assessment)

        assert record.risk_score == assessment.risk_metrics.overall_risk_score
        assert record.il_percentage == assessment.il_analysis.current_il
        assert record.portfolio_value == 100000
        assert record.volatility == pytest.approx(0.25)

    def test_stress_tests(self, engine, diversified_positions):
        results = engine.run_all_stress_tests(diversified_positions)
        assert len(results) == 5
        crash = engine.run_stress_test(diversified_positions, "market-crash-20")
        assert crash.expected_loss == pytest.approx(20000)
