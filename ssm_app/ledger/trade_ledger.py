"""
Append-only ledger of executed trades.

Records are appended in arrival order and never removed. The ledger is not
kept sorted between appends; it is re-sorted, most recent first, at the start
of every windowed read.
"""

from collections.abc import Iterator
from datetime import datetime, timedelta
from typing import Optional

import structlog

from ssm_app.errors import NoTradesError, NoTradesInWindowError
from ssm_app.metrics.index import calculate_geometric_mean
from ssm_app.metrics.vwap import calculate_volume_weighted_price
from ssm_app.models.security import SecurityKind
from ssm_app.models.trade import TradeRecord
from ssm_app.utils.time import format_market_time, window_cutoff

logger = structlog.get_logger(__name__)


class TradeLedger:
    """Time-ordered store of TradeRecords owned by a single market."""

    def __init__(self) -> None:
        self._trades: list[TradeRecord] = []

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(list(self._trades))

    def append(self, record: TradeRecord) -> None:
        """Add a record to the end of the ledger."""
        if not isinstance(record, TradeRecord):
            raise TypeError(f"Ledger accepts TradeRecord, got {type(record).__name__}")
        self._trades.append(record)

    def latest(self) -> Optional[TradeRecord]:
        """Most recent trade by timestamp, None if the ledger is empty."""
        if not self._trades:
            return None
        return max(self._trades, key=TradeRecord.sort_key)

    def prices(self) -> list[float]:
        """Unit prices of every trade, in insertion order."""
        return [record.unit_price for record in self._trades]

    def _sort_most_recent_first(self) -> None:
        # list.sort is stable with reverse=True, so equal timestamps keep
        # insertion order.
        self._trades.sort(key=TradeRecord.sort_key, reverse=True)

    def volume_weighted_price(self, kind: SecurityKind, now: datetime, window: timedelta) -> float:
        """
        Volume weighted price of ``kind`` over the window ending at ``now``.

        Args:
            kind: Security kind to aggregate
            now: End of the window, sampled once by the caller
            window: Trailing window length

        Returns:
            sum(price * quantity) / sum(quantity) over matching trades

        Raises:
            NoTradesError: If the ledger is empty
            NoTradesInWindowError: If no trade of ``kind`` is inside the window
        """
        kind = SecurityKind(kind)
        if not self._trades:
            raise NoTradesError(
                "Volume weighted price needs at least one trade in the market",
                metric_name="volume_weighted_price",
            )

        cutoff = window_cutoff(now, window)

        # The scan short-circuits on the first too-old record, which is only
        # valid while the whole ledger is sorted.
        self._sort_most_recent_first()
        result = calculate_volume_weighted_price(self._trades, kind, cutoff)

        if result is None:
            raise NoTradesInWindowError(
                f"No {kind.value} trades since {format_market_time(cutoff)}",
                kind=kind.value,
                cutoff=cutoff,
                context={"window_seconds": window.total_seconds(), "trade_count": len(self._trades)},
            )

        logger.debug(
            "Calculated volume weighted price",
            kind=kind.value,
            cutoff=format_market_time(cutoff),
            value=result,
        )
        return result

    def geometric_mean_price(self) -> float:
        """
        Geometric mean of every trade price, regardless of kind or time.

        Raises:
            NoTradesError: If the ledger is empty
        """
        result = calculate_geometric_mean(self.prices())
        if result is None:
            raise NoTradesError(
                "All-Share Index needs at least one trade in the market",
                metric_name="all_share_index",
            )
        return result
