"""Portfolio stress testing.

Applies fixed market shocks to every position and reports the stressed
value, expected loss and a per-position survival rating.
"""

from lp_risk.engine.models.enums import Priority
from lp_risk.engine.models.position import LiquidityPosition
from lp_risk.engine.models.stress import (
    PositionStressResult,
    StressScenario,
    StressTestResult,
)
from lp_risk.engine.portfolio.risk_metrics import calc_total_value

STRESS_SCENARIOS: dict[str, StressScenario] = {
    scenario.scenario_id: scenario
    for scenario in (
        StressScenario(
            scenario_id="market-crash-20",
            name="Market Crash -20%",
            description="Sudden 20% market decline across all assets",
            severity=Priority.MEDIUM,
            value_multiplier=0.80,
            il_increase=0.05,
            liquidity_risk=35.0,
            recovery="7-14 days",
        ),
        StressScenario(
            scenario_id="market-crash-50",
            name="Market Crash -50%",
            description="Severe market crash with 50% decline",
            severity=Priority.HIGH,
            value_multiplier=0.50,
            il_increase=0.15,
            liquidity_risk=70.0,
            recovery="30-60 days",
        ),
        StressScenario(
            scenario_id="market-crash-80",
            name="Market Crash -80%",
            description="Catastrophic market collapse",
            severity=Priority.CRITICAL,
            value_multiplier=0.20,
            il_increase=0.30,
            liquidity_risk=95.0,
            recovery="90+ days",
        ),
        StressScenario(
            scenario_id="volatility-spike",
            name="Volatility Spike",
            description="3x increase in market volatility",
            severity=Priority.MEDIUM,
            value_multiplier=0.92,
            il_increase=0.10,
            liquidity_risk=45.0,
            recovery="3-7 days",
        ),
        StressScenario(
            scenario_id="liquidity-crisis",
            name="Liquidity Crisis",
            description="Sudden liquidity drain from pools",
            severity=Priority.HIGH,
            value_multiplier=0.85,
            il_increase=0.08,
            liquidity_risk=85.0,
            recovery="14-21 days",
        ),
    )
}


def calc_survival_rating(loss_percentage: float) -> str:
    """Survival rating: loss < 20% high, < 50% medium, else low."""
    if loss_percentage < 20:
        return "high"
    if loss_percentage < 50:
        return "medium"
    return "low"


def run_stress_test(
    positions: list[LiquidityPosition],
    scenario_id: str,
) -> StressTestResult:
    """Apply one stress scenario to a portfolio.

    Args:
        positions: Portfolio positions.
        scenario_id: Key of STRESS_SCENARIOS.

    Returns:
        StressTestResult with portfolio and per-position outcomes.

    Raises:
        KeyError: If scenario_id is unknown.
    """
    scenario = STRESS_SCENARIOS[scenario_id]

    position_results = []
    for pos in positions:
        value = pos.value
        stressed_value = value * scenario.value_multiplier
        loss = value - stressed_value
        loss_percentage = loss / value * 100 if value > 0 else 0.0
        position_results.append(
            PositionStressResult(
                pair_key=pos.pair_key,
                current_value=value,
                stressed_value=stressed_value,
                loss=loss,
                loss_percentage=loss_percentage,
                survival_rating=calc_survival_rating(loss_percentage),
            )
        )

    total_value = calc_total_value(positions)
    stressed_total = total_value * scenario.value_multiplier

    return StressTestResult(
        scenario=scenario,
        current_value=total_value,
        stressed_value=stressed_total,
        expected_loss=total_value - stressed_total,
        il_increase=total_value * scenario.il_increase,
        liquidity_risk=scenario.liquidity_risk,
        positions=position_results,
    )


def run_all_stress_tests(positions: list[LiquidityPosition]) -> list[StressTestResult]:
    """Apply every stress scenario, in STRESS_SCENARIOS order."""
    return [run_stress_test(positions, scenario_id) for scenario_id in STRESS_SCENARIOS]
