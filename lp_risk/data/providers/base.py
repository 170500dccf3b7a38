"""Abstract base class for volatility providers."""

from abc import ABC, abstractmethod


class VolatilityProvider(ABC):
    """Source of annualized volatility estimates for token pairs.

    Implementations may raise on any failure (network error, unknown pair,
    insufficient history). The risk engine catches the error per pair and
    substitutes its configured default.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'static', 'price_history')."""
        pass

    @abstractmethod
    def get_pair_volatility(self, token_a: str, token_b: str) -> float:
        """Get annualized volatility for a token pair.

        Args:
            token_a: Base token identifier.
            token_b: Quote token identifier.

        Returns:
            Annualized volatility as a decimal (0.25 = 25%).
        """
        pass
