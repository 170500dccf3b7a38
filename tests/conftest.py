"""
Shared pytest fixtures for risk engine tests.
"""

from datetime import datetime, timedelta
from typing import Callable

import pytest

from lp_risk.data.providers.base import VolatilityProvider
from lp_risk.engine.models.position import LiquidityPosition

AS_OF = datetime(2025, 1, 31, 12, 0, 0)


class FailingVolatilityProvider(VolatilityProvider):
    """Raises for every pair in ``failing``, answers ``volatility`` otherwise."""

    def __init__(self, failing: set[tuple[str, str]] | None = None, volatility: float = 0.5):
        self.failing = failing
        self.volatility = volatility
        self.calls: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return "failing"

    def get_pair_volatility(self, token_a: str, token_b: str) -> float:
        self.calls.append((token_a, token_b))
        if self.failing is None or (token_a, token_b) in self.failing:
            raise ConnectionError(f"price feed down for {token_a}-{token_b}")
        return self.volatility


@pytest.fixture
def as_of() -> datetime:
    """Fixed reference time for holding-period calculations."""
    return AS_OF


@pytest.fixture
def make_position() -> Callable[..., LiquidityPosition]:
    """Factory for LiquidityPosition with sensible defaults."""

    def _make(
        token_x: str = "SOL",
        token_y: str = "USDC",
        total_value: float | None = 10000.0,
        pnl_percentage: float | None = 0.0,
        age_days: float | None = 45,
        **kwargs,
    ) -> LiquidityPosition:
        if "created_at" not in kwargs:
            kwargs["created_at"] = AS_OF - timedelta(days=age_days) if age_days is not None else None
        return LiquidityPosition(
            token_x=token_x,
            token_y=token_y,
            total_value=total_value,
            pnl_percentage=pnl_percentage,
            **kwargs,
        )

    return _make


@pytest.fixture
def diversified_positions(make_position) -> list[LiquidityPosition]:
    """Five $20,000 positions in five distinct pairs."""
    pairs = [("SOL", "USDC"), ("JUP", "USDC"), ("BONK", "SOL"), ("JTO", "USDC"), ("WIF", "SOL")]
    return [
        make_position(token_x=x, token_y=y, total_value=20000, pnl_percentage=pnl)
        for (x, y), pnl in zip(pairs, [4.0, -2.0, 7.5, 1.0, -3.5])
    ]


@pytest.fixture
def failing_provider_cls() -> type[FailingVolatilityProvider]:
    return FailingVolatilityProvider
