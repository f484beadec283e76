"""
Analytics error classifications.

These exceptions represent genuine preconditions of an analytics query that
the current market state does not satisfy. They are never absorbed by the
market and must be handled by the caller.
"""

from datetime import datetime
from typing import Optional

from .base import MarketError


class AnalyticsError(MarketError):
    """Base class for analytics that cannot be computed."""


class UnsupportedOperationError(AnalyticsError):
    """Operation is undefined for the shape of the security."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.symbol = symbol


class NoTradesError(AnalyticsError):
    """Ledger is empty but the aggregate needs at least one trade."""

    def __init__(self, message: str, metric_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric_name = metric_name


class NoTradesInWindowError(AnalyticsError):
    """No trade of the requested kind falls inside the time window."""

    def __init__(self, message: str, kind: Optional[str] = None,
                 cutoff: Optional[datetime] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.cutoff = cutoff
