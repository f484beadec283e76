"""
Security models for instruments listed on the market.

A security is either an ordinary share, which has no fixed dividend, or a
preferential share, which always carries a fixed dividend rate. The two are
separate immutable types, so a preferential share without a rate cannot be
represented.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ssm_app.errors import (
    InvalidQueryError,
    InvalidSecurityError,
    UnsupportedOperationError,
)


class SecurityKind(str, Enum):
    """Kinds of security traded on the market."""
    ORDINARY = "ordinary"
    PREFERENTIAL = "preferential"


def _check_query_price(price: float) -> None:
    """Reject non-positive prices passed to yield and ratio queries."""
    if not price > 0.0:
        raise InvalidQueryError(
            f"Price must be greater than zero, got {price}",
            field="price",
            value=price,
        )


@dataclass(frozen=True)
class Security(ABC):
    """Fields and validation shared by every kind of security."""

    symbol: str           # Unique registry key, e.g. "TEA"
    par_value: float      # Par value in pence
    last_dividend: float  # Last dividend in pence

    def __post_init__(self):
        """Validate shared construction parameters."""
        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise InvalidSecurityError(
                "Symbol must be a non-empty string",
                field="symbol",
                value=self.symbol,
            )
        if not self.par_value > 0.0:
            raise InvalidSecurityError(
                f"Par value must be greater than zero, got {self.par_value}",
                symbol=self.symbol,
                field="par_value",
                value=self.par_value,
            )
        if not self.last_dividend >= 0.0:
            raise InvalidSecurityError(
                f"Last dividend must not be negative, got {self.last_dividend}",
                symbol=self.symbol,
                field="last_dividend",
                value=self.last_dividend,
            )

    @property
    @abstractmethod
    def kind(self) -> SecurityKind:
        """Kind of security, copied onto every trade in it."""

    @abstractmethod
    def dividend_yield(self, price: float) -> float:
        """Dividend yield at the given price."""

    @abstractmethod
    def pe_ratio(self, price: float) -> float:
        """Price to earnings ratio at the given price."""


@dataclass(frozen=True)
class OrdinaryShare(Security):
    """Ordinary share: yield is driven by the last dividend paid."""

    @property
    def kind(self) -> SecurityKind:
        return SecurityKind.ORDINARY

    def dividend_yield(self, price: float) -> float:
        """
        Dividend yield for a given price.

        Args:
            price: Price in pence (must be greater than zero)

        Returns:
            last_dividend / price
        """
        _check_query_price(price)
        return self.last_dividend / price

    def pe_ratio(self, price: float) -> float:
        """Ordinary shares have no fixed dividend, so no P/E ratio is defined."""
        _check_query_price(price)
        raise UnsupportedOperationError(
            f"P/E ratio is undefined for {self.symbol}: no fixed dividend rate",
            operation="pe_ratio",
            symbol=self.symbol,
        )


@dataclass(frozen=True)
class PreferentialShare(Security):
    """Preferential share with a mandatory fixed dividend rate."""

    fixed_dividend_rate: float  # Fraction of par value, 0.02 means 2%

    def __post_init__(self):
        """Validate shared fields, then the fixed dividend rate."""
        super().__post_init__()
        _check_fixed_dividend_rate(self.fixed_dividend_rate, self.symbol)

    @property
    def kind(self) -> SecurityKind:
        return SecurityKind.PREFERENTIAL

    def dividend_yield(self, price: float) -> float:
        """
        Dividend yield for a given price.

        Args:
            price: Price in pence (must be greater than zero)

        Returns:
            fixed_dividend_rate * par_value / price
        """
        _check_query_price(price)
        return self.fixed_dividend_rate * self.par_value / price

    def pe_ratio(self, price: float) -> float:
        """
        P/E ratio for a given price.

        Args:
            price: Price in pence (must be greater than zero)

        Returns:
            price / fixed_dividend_rate
        """
        _check_query_price(price)
        return price / self.fixed_dividend_rate


AnySecurity = Union[OrdinaryShare, PreferentialShare]


def _check_fixed_dividend_rate(rate: float, symbol: Optional[str] = None) -> None:
    if not rate > 0.0:
        raise InvalidSecurityError(
            f"Fixed dividend rate must be greater than zero, got {rate}",
            symbol=symbol,
            field="fixed_dividend_rate",
            value=rate,
        )
    if rate > 1.0:
        raise InvalidSecurityError(
            f"Fixed dividend rate must not be greater than one, got {rate}",
            symbol=symbol,
            field="fixed_dividend_rate",
            value=rate,
        )


def create_security(
    symbol: str,
    kind: SecurityKind,
    par_value: float,
    last_dividend: float,
    fixed_dividend_rate: Optional[float] = None,
) -> AnySecurity:
    """
    Build a validated security of the requested kind.

    Without ``fixed_dividend_rate`` only ordinary shares can be built. With
    it, the rate must lie in (0, 1] whatever the kind, and only a
    preferential share may carry it.

    Args:
        symbol: Registry key for the security
        kind: Ordinary or preferential
        par_value: Par value in pence (must be greater than zero)
        last_dividend: Last dividend in pence (must not be negative)
        fixed_dividend_rate: Fixed dividend as a fraction, e.g. 0.02 for 2%

    Returns:
        OrdinaryShare or PreferentialShare

    Raises:
        InvalidSecurityError: If any parameter is malformed
    """
    try:
        kind = SecurityKind(kind)
    except ValueError:
        raise InvalidSecurityError(
            f"Unknown security kind: {kind!r}",
            symbol=symbol,
            field="kind",
            value=kind,
        ) from None

    if fixed_dividend_rate is None:
        if kind is SecurityKind.PREFERENTIAL:
            raise InvalidSecurityError(
                "Preferential security must have a fixed dividend rate",
                symbol=symbol,
                field="fixed_dividend_rate",
                value=None,
            )
        return OrdinaryShare(symbol, par_value, last_dividend)

    if kind is SecurityKind.ORDINARY:
        OrdinaryShare(symbol, par_value, last_dividend)
        _check_fixed_dividend_rate(fixed_dividend_rate, symbol)
        raise InvalidSecurityError(
            "Ordinary security must not have a fixed dividend rate",
            symbol=symbol,
            field="fixed_dividend_rate",
            value=fixed_dividend_rate,
        )

    return PreferentialShare(symbol, par_value, last_dividend, fixed_dividend_rate)
