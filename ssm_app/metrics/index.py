"""All-Share Index (geometric mean of trade prices)"""

import math
from collections.abc import Sequence
from typing import Optional


def calculate_geometric_mean(prices: Sequence[float]) -> Optional[float]:
    """
    Calculate the geometric mean of a sequence of prices.

    Computed as exp(mean(log(p))) so that long ledgers cannot overflow the
    running product. Matches (p1 * p2 * ... * pN) ** (1 / N) within
    floating-point tolerance.

    Args:
        prices: Strictly positive prices

    Returns:
        Geometric mean or None if ``prices`` is empty
    """
    if not prices:
        return None

    if any(not price > 0.0 for price in prices):
        raise ValueError("Geometric mean requires strictly positive prices")

    if len(prices) == 1:
        return float(prices[0])

    log_sum = math.fsum(math.log(price) for price in prices)
    return math.exp(log_sum / len(prices))
