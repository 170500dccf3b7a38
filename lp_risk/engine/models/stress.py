"""Stress test data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from lp_risk.engine.models.enums import Priority


@dataclass(frozen=True)
class StressScenario:
    """A fixed market shock applied to every position.

    Attributes:
        scenario_id: Stable identifier, e.g. "market-crash-20".
        name: Display name.
        description: One-line description of the shock.
        severity: How severe the shock is.
        value_multiplier: Fraction of value left after the shock.
        il_increase: Additional IL as a fraction of portfolio value.
        liquidity_risk: Liquidity risk score under the shock, 0-100.
        recovery: Expected recovery period.
    """

    scenario_id: str
    name: str
    description: str
    severity: Priority
    value_multiplier: float
    il_increase: float
    liquidity_risk: float
    recovery: str


@dataclass(frozen=True)
class PositionStressResult:
    """Stress outcome for one position."""

    pair_key: str
    current_value: float
    stressed_value: float
    loss: float
    loss_percentage: float
    survival_rating: str  # "high" / "medium" / "low"


@dataclass(frozen=True)
class StressTestResult:
    """Stress outcome for the whole portfolio."""

    scenario: StressScenario
    current_value: float
    stressed_value: float
    expected_loss: float
    il_increase: float
    liquidity_risk: float
    positions: list[PositionStressResult] = field(default_factory=list)
