"""
Validation error classifications for securities, trades and queries.

These exceptions are raised when an input is structurally malformed. They
are recoverable: the caller can correct the input and try again.
"""

from typing import Optional, Any

from .base import MarketError


class ValidationError(MarketError):
    """Base class for malformed input parameters."""

    recoverable = True

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class InvalidSecurityError(ValidationError):
    """Bad par value, negative dividend, or bad/missing fixed dividend rate."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class InvalidTradeError(ValidationError):
    """Non-positive quantity or price on a trade."""


class InvalidQueryError(ValidationError):
    """Bad argument supplied to a yield or ratio query."""


class UnknownSecurityError(InvalidQueryError):
    """Query references a symbol that is not registered."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, field="symbol", value=symbol, **kwargs)
        self.symbol = symbol
