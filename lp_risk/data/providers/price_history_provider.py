"""Price-history volatility provider.

Keeps a rolling price-ratio history per token pair and answers volatility
lookups with annualized historical volatility.
"""

import logging
import threading
from collections import defaultdict

from lp_risk.data.providers.base import VolatilityProvider
from lp_risk.engine.volatility.historical import DAYS_PER_YEAR, calc_hv

logger = logging.getLogger(__name__)


class PriceHistoryVolatilityProvider(VolatilityProvider):
    """Volatility from recorded pair prices (one sample per day).

    Example:
        >>> provider = PriceHistoryVolatilityProvider()
        >>> provider.add_prices("SOL", "USDC", [100, 104, 99, 101, 103])
        >>> provider.get_pair_volatility("SOL", "USDC") > 0
        True
    """

    def __init__(
        self,
        max_history: int = 90,
        periods_per_year: int = DAYS_PER_YEAR,
    ) -> None:
        """Initialize provider.

        Args:
            max_history: Number of most recent prices kept per pair.
            periods_per_year: Sampling periods per year for annualization.
        """
        self._max_history = max_history
        self._periods_per_year = periods_per_year
        self._history: dict[tuple[str, str], list[float]] = defaultdict(list)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "price_history"

    def add_prices(self, token_a: str, token_b: str, prices: list[float]) -> None:
        """Append prices (oldest to newest) to a pair's history."""
        with self._lock:
            history = self._history[(token_a, token_b)]
            history.extend(float(p) for p in prices)
            del history[: -self._max_history]

    def get_history(self, token_a: str, token_b: str) -> list[float]:
        """Return a copy of a pair's recorded prices."""
        with self._lock:
            return list(self._history.get((token_a, token_b), []))

    def get_pair_volatility(self, token_a: str, token_b: str) -> float:
        """Annualized HV of the pair's recorded prices.

        Raises:
            LookupError: If the pair has no usable history.
        """
        prices = self.get_history(token_a, token_b)
        hv = calc_hv(prices, periods_per_year=self._periods_per_year)
        if hv is None:
            raise LookupError(
                f"Insufficient price history for {token_a}-{token_b}: {len(prices)} prices"
            )
        logger.debug(f"HV {token_a}-{token_b}: {hv:.4f} from {len(prices)} prices")
        return hv
