"""Volatility providers."""

from lp_risk.data.providers.base import VolatilityProvider
from lp_risk.data.providers.price_history_provider import PriceHistoryVolatilityProvider
from lp_risk.data.providers.static_provider import STATIC_VOLATILITY, StaticVolatilityProvider

__all__ = [
    "VolatilityProvider",
    "StaticVolatilityProvider",
    "PriceHistoryVolatilityProvider",
    "STATIC_VOLATILITY",
]
