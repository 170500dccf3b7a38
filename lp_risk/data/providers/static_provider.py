"""Static volatility provider.

Returns a fixed volatility for every pair unless an override is registered.
Used as the default collaborator when no price history is available.
"""

from lp_risk.data.providers.base import VolatilityProvider

# Moderate annualized volatility assumed without historical data
STATIC_VOLATILITY = 0.25


class StaticVolatilityProvider(VolatilityProvider):
    """Fixed-value volatility provider with optional per-pair overrides."""

    def __init__(
        self,
        volatility: float = STATIC_VOLATILITY,
        overrides: dict[tuple[str, str], float] | None = None,
    ) -> None:
        self._volatility = volatility
        self._overrides = dict(overrides or {})

    @property
    def name(self) -> str:
        return "static"

    def set_pair_volatility(self, token_a: str, token_b: str, volatility: float) -> None:
        """Register a fixed volatility for one pair."""
        self._overrides[(token_a, token_b)] = volatility

    def get_pair_volatility(self, token_a: str, token_b: str) -> float:
        return self._overrides.get((token_a, token_b), self._volatility)
