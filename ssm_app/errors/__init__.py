"""
Error classification for the stock market model.

Validation errors describe malformed inputs rejected at construction or
query time. Analytics errors describe preconditions an analytics query
could not meet and are always propagated to the caller.
"""

from .base import MarketError
from .validation import (
    ValidationError,
    InvalidSecurityError,
    InvalidTradeError,
    InvalidQueryError,
    UnknownSecurityError,
)
from .analytics import (
    AnalyticsError,
    UnsupportedOperationError,
    NoTradesError,
    NoTradesInWindowError,
)

__all__ = [
    "MarketError",
    # Validation Errors
    "ValidationError",
    "InvalidSecurityError",
    "InvalidTradeError",
    "InvalidQueryError",
    "UnknownSecurityError",
    # Analytics Errors
    "AnalyticsError",
    "UnsupportedOperationError",
    "NoTradesError",
    "NoTradesInWindowError",
]
