"""Tests for RecommendationEngine."""

from lp_risk.business.config import RiskConfig
from lp_risk.business.monitoring import RECOMMENDATION_RULES, RecommendationEngine
from lp_risk.engine.models import Priority, RecommendationType, RiskMetrics


def _metrics(**kwargs) -> RiskMetrics:
    """RiskMetrics with every score 0 unless given."""
    return RiskMetrics(**kwargs)


class TestRecommendationEngine:
    """Tests for rule evaluation."""

    def setup_method(self):
        self.engine = RecommendationEngine(RiskConfig())

    def test_no_breach_no_recommendations(self, make_position):
        assert self.engine.recommend(_metrics(), [make_position()]) == []

    def test_reduce_exposure(self):
        recs = self.engine.recommend(_metrics(overall_risk_score=75), [])
        assert len(recs) == 1
        rec = recs[0]
        assert rec.type == RecommendationType.REDUCE_EXPOSURE
        assert rec.priority == Priority.HIGH
        assert rec.expected_impact == 25
        assert rec.estimated_cost == 50
        assert len(rec.action_items) == 3

    def test_hedge_on_il_risk(self):
        recs = self.engine.recommend(_metrics(impermanent_loss_risk=39), [])
        assert [r.type for r in recs] == [RecommendationType.HEDGE]
        assert recs[0].priority == Priority.CRITICAL

    def test_diversify_on_concentration(self):
        recs = self.engine.recommend(_metrics(concentration_risk=100), [])
        assert [r.type for r in recs] == [RecommendationType.DIVERSIFY]
        assert recs[0].priority == Priority.MEDIUM
        assert recs[0].description == "Portfolio is too concentrated in specific tokens."

    def test_monitor_on_liquidity(self):
        recs = self.engine.recommend(_metrics(liquidity_risk=60), [])
        assert [r.type for r in recs] == [RecommendationType.MONITOR]

    def test_comparison_is_strict(self):
        """A metric exactly at its threshold does not fire."""
        metrics = _metrics(
            overall_risk_score=70,
            impermanent_loss_risk=15,
            concentration_risk=40,
            liquidity_risk=40,
        )
        assert self.engine.recommend(metrics, []) == []

    def test_all_rules_fire_in_order(self):
        metrics = _metrics(
            overall_risk_score=90,
            impermanent_loss_risk=90,
            concentration_risk=90,
            liquidity_risk=90,
        )
        recs = self.engine.recommend(metrics, [])
        assert [r.type for r in recs] == [rule.type for rule in RECOMMENDATION_RULES]

    def test_threshold_snapshot_argument(self):
        """An explicit snapshot is used instead of the config's thresholds."""
        config = RiskConfig()
        snapshot = config.thresholds
        config.update_thresholds({"max_concentration": 95})

        engine = RecommendationEngine(config)
        metrics = _metrics(concentration_risk=60)
        assert engine.recommend(metrics, []) == []
        assert len(engine.recommend(metrics, [], snapshot)) == 1

    def test_action_items_independent(self):
        """Each recommendation owns its action item list."""
        metrics = _metrics(concentration_risk=100)
        first = self.engine.recommend(metrics, [])[0]
        second = self.engine.recommend(metrics, [])[0]
        first.action_items.append("extra")
        assert "extra" not in second.action_items
