"""Volume weighted price over a trailing window"""

from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from ssm_app.models.security import SecurityKind
from ssm_app.models.trade import TradeRecord


def calculate_volume_weighted_price(
    records: Iterable[TradeRecord],
    kind: SecurityKind,
    cutoff: datetime,
) -> Optional[float]:
    """
    Calculate the volume weighted price of one security kind.

    VWP = sum(unit_price * quantity) / sum(quantity)

    ``records`` must be ordered most recent first. The scan stops at the first
    record older than ``cutoff``; any record after it is older still.

    Args:
        records: Trade records sorted by timestamp descending
        kind: Security kind to aggregate
        cutoff: Oldest timestamp included in the window

    Returns:
        Volume weighted price or None if no matching trade is in the window
    """
    numerator = 0.0
    denominator = 0

    for record in records:
        if record.timestamp < cutoff:
            break
        if record.kind == kind:
            numerator += record.notional
            denominator += record.quantity

    if denominator == 0:
        return None

    return numerator / denominator
