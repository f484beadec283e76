"""
Outcome of operations at the market boundary.

Lower layers raise typed errors. The market converts them into an
OperationResult, logs the detail, and hands its caller only ``success``.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ssm_app.errors import MarketError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Either Ok(value) or Err(error)."""

    value: Optional[T] = None
    error: Optional[MarketError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def error_type(self) -> Optional[str]:
        """Class name of the error, None on success."""
        return type(self.error).__name__ if self.error is not None else None

    @classmethod
    def ok(cls, value: T) -> "OperationResult[T]":
        """Create successful result."""
        return cls(value=value)

    @classmethod
    def err(cls, error: MarketError) -> "OperationResult[T]":
        """Create failed result."""
        return cls(error=error)
