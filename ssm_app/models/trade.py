"""
Executed trade records.

A TradeRecord is created by the market at the moment a trade is accepted and
is never mutated afterwards. Records order by timestamp descending, so the
most recent trade sorts first.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ssm_app.errors import InvalidTradeError
from ssm_app.utils.time import ensure_utc

from .security import SecurityKind


class TradeDirection(str, Enum):
    """Side of an executed trade."""
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class TradeRecord:
    """Immutable record of one buy or sell execution."""
    timestamp: datetime         # UTC execution time
    kind: SecurityKind          # Kind of the traded security at trade time
    quantity: int               # Number of shares, > 0
    direction: TradeDirection   # Buy or sell
    unit_price: float           # Price per share in pence, > 0

    def __post_init__(self):
        """Validate quantity and price, normalize timestamp to UTC."""
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidTradeError(
                f"Trade quantity must be an integer, got {self.quantity!r}",
                field="quantity",
                value=self.quantity,
            )
        if self.quantity <= 0:
            raise InvalidTradeError(
                f"Trade quantity must be greater than zero, got {self.quantity}",
                field="quantity",
                value=self.quantity,
            )
        if not self.unit_price > 0.0:
            raise InvalidTradeError(
                f"Trade price must be greater than zero, got {self.unit_price}",
                field="unit_price",
                value=self.unit_price,
            )

        try:
            kind = SecurityKind(self.kind)
            direction = TradeDirection(self.direction)
        except ValueError as e:
            raise InvalidTradeError(str(e), field="kind/direction") from e

        # Frozen dataclass, so normalized values go through object.__setattr__
        object.__setattr__(self, "timestamp", ensure_utc(self.timestamp))
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "direction", direction)

    @property
    def notional(self) -> float:
        """Traded value, unit_price * quantity."""
        return self.unit_price * self.quantity

    @staticmethod
    def sort_key(record: "TradeRecord") -> datetime:
        """Key for ``sorted(..., reverse=True)``, giving most recent first."""
        return record.timestamp


def compare_trades(a: TradeRecord, b: TradeRecord) -> int:
    """
    Three-way comparison putting later trades first.

    Returns:
        Sign of ``b.timestamp - a.timestamp``: -1 when ``a`` is more recent,
        1 when ``b`` is more recent, 0 on equal timestamps
    """
    if a.timestamp > b.timestamp:
        return -1
    if a.timestamp < b.timestamp:
        return 1
    return 0
