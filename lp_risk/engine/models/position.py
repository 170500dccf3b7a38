"""Liquidity position model for portfolio risk calculations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LiquidityPosition:
    """Snapshot of a single liquidity position.

    The engine treats positions as read-only input. Malformed values are
    tolerated: accessors such as ``value`` and ``pnl`` normalize them instead
    of raising.

    Attributes:
        token_x: Base token identifier (mint address or symbol).
        token_y: Quote token identifier.
        total_value: Position value in USD.
        pnl_percentage: Unrealized P&L of the position, in percent.
        created_at: When the position was opened. None reads as "now".
        position_id: Optional identifier, only used for reporting.
        entry_price: Price of token_x in token_y when the position was opened.
        current_price: Current price of token_x in token_y.
        impermanent_loss_pct: Precomputed IL in percent. Takes precedence
            over entry/current price when set.

    Example:
        >>> pos = LiquidityPosition(token_x="SOL", token_y="USDC", total_value=5000)
        >>> pos.pair_key
        'SOL-USDC'
    """

    token_x: str
    token_y: str
    total_value: float | None = 0.0
    pnl_percentage: float | None = 0.0
    created_at: datetime | None = None
    position_id: str = ""
    entry_price: float | None = None
    current_price: float | None = None
    impermanent_loss_pct: float | None = None

    @property
    def pair_key(self) -> str:
        """Token pair identifier, ``"<token_x>-<token_y>"``."""
        return f"{self.token_x}-{self.token_y}"

    @property
    def value(self) -> float:
        """USD value, with missing or negative values read as 0."""
        if self.total_value is None or self.total_value < 0:
            return 0.0
        return float(self.total_value)

    @property
    def pnl(self) -> float:
        """P&L percentage, with a missing value read as 0."""
        if self.pnl_percentage is None:
            return 0.0
        return float(self.pnl_percentage)

    def age_days(self, now: datetime) -> float:
        """Days since the position was opened, floored at 0."""
        if self.created_at is None:
            return 0.0
        created = self.created_at
        # Naive datetimes are local time
        if created.tzinfo is None and now.tzinfo is not None:
            now = now.astimezone().replace(tzinfo=None)
        elif created.tzinfo is not None and now.tzinfo is None:
            created = created.astimezone().replace(tzinfo=None)
        days = (now - created).total_seconds() / 86400
        return max(days, 0.0)
