"""Market analytics over the trade ledger"""

from .index import calculate_geometric_mean
from .vwap import calculate_volume_weighted_price

__all__ = [
    "calculate_geometric_mean",
    "calculate_volume_weighted_price",
]
