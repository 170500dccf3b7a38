"""Tests for volatility providers."""

import math

import pytest

from lp_risk.data.providers import (
    STATIC_VOLATILITY,
    PriceHistoryVolatilityProvider,
    StaticVolatilityProvider,
)
from lp_risk.engine.volatility import calc_hv


class TestStaticVolatilityProvider:
    """Tests for StaticVolatilityProvider."""

    def test_default(self):
        provider = StaticVolatilityProvider()
        assert provider.name == "static"
        assert provider.get_pair_volatility("SOL", "USDC") == STATIC_VOLATILITY

    def test_overrides(self):
        provider = StaticVolatilityProvider(0.3, overrides={("BONK", "SOL"): 0.9})
        provider.set_pair_volatility("JUP", "USDC", 0.5)

        assert provider.get_pair_volatility("BONK", "SOL") == 0.9
        assert provider.get_pair_volatility("JUP", "USDC") == 0.5
        assert provider.get_pair_volatility("SOL", "USDC") == 0.3


class TestPriceHistoryVolatilityProvider:
    """Tests for PriceHistoryVolatilityProvider."""

    def test_volatility_from_history(self):
        prices = [100, 104, 99, 101, 103, 98, 102]
        provider = PriceHistoryVolatilityProvider()
        provider.add_prices("SOL", "USDC", prices)

        assert provider.name == "price_history"
        assert provider.get_pair_volatility("SOL", "USDC") == pytest.approx(calc_hv(prices))

    def test_history_is_capped(self):
        provider = PriceHistoryVolatilityProvider(max_history=5)
        provider.add_prices("SOL", "USDC", range(1, 9))
        assert provider.get_history("SOL", "USDC") == [4.0, 5.0, 6.0, 7.0, 8.0]

    def test_history_appends(self):
        provider = PriceHistoryVolatilityProvider()
        provider.add_prices("SOL", "USDC", [100, 101])
        provider.add_prices("SOL", "USDC", [102])
        assert provider.get_history("SOL", "USDC") == [100.0, 101.0, 102.0]

    def test_pairs_are_directional(self):
        provider = PriceHistoryVolatilityProvider()
        provider.add_prices("SOL", "USDC", [100, 101, 102])
        assert provider.get_history("USDC", "SOL") == []

    def test_insufficient_history(self):
        provider = PriceHistoryVolatilityProvider()
        provider.add_prices("SOL", "USDC", [100, 101])
        with pytest.raises(LookupError):
            provider.get_pair_volatility("SOL", "USDC")
        with pytest.raises(LookupError):
            provider.get_pair_volatility("JUP", "USDC")

    def test_nan_price_in_history(self):
        provider = PriceHistoryVolatilityProvider()
        provider.add_prices("SOL", "USDC", [100, 101, float("nan"), 102])
        with pytest.raises(LookupError):
            provider.get_pair_volatility("SOL", "USDC")

    def test_annualization_period(self):
        prices = [100, 104, 99, 101, 103]
        daily = PriceHistoryVolatilityProvider(periods_per_year=1)
        yearly = PriceHistoryVolatilityProvider()
        daily.add_prices("SOL", "USDC", prices)
        yearly.add_prices("SOL", "USDC", prices)
        assert yearly.get_pair_volatility("SOL", "USDC") == pytest.approx(
            daily.get_pair_volatility("SOL", "USDC") * math.sqrt(365)
        )
