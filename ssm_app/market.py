"""
Stock market coordinator.

Owns the security registry and the trade ledger. Registration and trade
execution are isolated from their callers: a bad request is logged and
reported as ``False`` instead of raising. Analytics queries propagate their
errors unchanged.
"""

from datetime import timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import InvalidSecurityError, MarketError, UnknownSecurityError
from .ledger.trade_ledger import TradeLedger
from .logging.config import get_market_logger, log_market_decision
from .models.results import OperationResult
from .models.security import Security, SecurityKind
from .models.trade import TradeDirection, TradeRecord
from .utils.time import Clock, format_market_time, utc_now

logger = structlog.get_logger(__name__)


class StockMarket:
    """
    Registry of securities plus the ledger of trades executed in them.

    Both collections only grow. The market assumes exclusive access per
    operation; concurrent callers must serialize access themselves.
    """

    def __init__(
        self,
        config: Optional[dict[str, Any]] = None,
        clock: Optional[Clock] = None,
        config_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize an empty market.

        Args:
            config: Overrides applied on top of market.yaml and defaults
            clock: Source of the current UTC time, defaults to the wall clock
            config_dir: Directory holding market.yaml

        Raises:
            ValueError: If the merged configuration is invalid
        """
        self.logger = logger
        self.market_logger = get_market_logger(__name__)

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = self.config_loader.merge_config(config)

        validation_errors = ConfigValidator.validate_config(self.config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            raise ValueError(f"Invalid market configuration: {'; '.join(error_msgs)}")

        self.clock: Clock = clock or utc_now
        self.vwap_window = timedelta(minutes=self.config["analytics"]["vwap_window_minutes"])

        self._securities: dict[str, Security] = {}
        self.ledger = TradeLedger()

        self.logger.info(
            "Stock market initialized",
            vwap_window_minutes=self.config["analytics"]["vwap_window_minutes"]
        )

    @property
    def securities(self) -> Mapping[str, Security]:
        """Read-only view of the registry keyed by symbol."""
        return MappingProxyType(self._securities)

    def security_count(self) -> int:
        """Number of securities registered in the market."""
        return len(self._securities)

    def trade_count(self) -> int:
        """Number of trades ever executed in the market."""
        return len(self.ledger)

    def get_security(self, symbol: str) -> Optional[Security]:
        """Registered security for ``symbol``, None if unknown."""
        return self._securities.get(symbol)

    def register_security(self, security: Security) -> bool:
        """
        Add a security to the registry.

        Duplicate symbols and anything that is not a Security are rejected.

        Returns:
            True if the security was registered
        """
        symbol = getattr(security, "symbol", None)

        try:
            result = self._register(security)
        except Exception as e:
            self.logger.error(
                "Unexpected error registering security",
                symbol=symbol,
                error=str(e),
                error_type=type(e).__name__
            )
            return False

        self._log_outcome("register_security", result, symbol)
        return result.success

    def execute_trade(
        self,
        symbol: str,
        quantity: int,
        direction: Union[TradeDirection, str],
        price: float,
    ) -> bool:
        """
        Record a trade in a registered security at the current time.

        Args:
            symbol: Symbol of the traded security (must be registered)
            quantity: Number of shares (must be greater than zero)
            direction: Buy or sell
            price: Price per share in pence (must be greater than zero)

        Returns:
            True if the trade was recorded
        """
        try:
            result = self._execute(symbol, quantity, direction, price)
        except Exception as e:
            self.logger.error(
                "Unexpected error executing trade",
                symbol=symbol,
                error=str(e),
                error_type=type(e).__name__
            )
            return False

        self._log_outcome("execute_trade", result, symbol)
        return result.success

    def _register(self, security: Security) -> OperationResult[Security]:
        if not isinstance(security, Security):
            return OperationResult.err(InvalidSecurityError(
                f"Expected a Security, got {type(security).__name__}",
                field="security",
                value=security,
            ))

        if security.symbol in self._securities:
            return OperationResult.err(InvalidSecurityError(
                f"Security {security.symbol} is already registered",
                symbol=security.symbol,
                field="symbol",
                value=security.symbol,
            ))

        self._securities[security.symbol] = security
        return OperationResult.ok(security)

    def _execute(
        self,
        symbol: str,
        quantity: int,
        direction: Union[TradeDirection, str],
        price: float,
    ) -> OperationResult[TradeRecord]:
        security = self._securities.get(symbol)
        if security is None:
            return OperationResult.err(UnknownSecurityError(
                f"Security {symbol} is not registered",
                symbol=symbol,
            ))

        try:
            record = TradeRecord(
                timestamp=self.clock(),
                kind=security.kind,
                quantity=quantity,
                direction=direction,
                unit_price=price,
            )
        except MarketError as e:
            return OperationResult.err(e)

        self.ledger.append(record)
        return OperationResult.ok(record)

    def _log_outcome(self, operation: str, result: OperationResult, symbol: Optional[str]) -> None:
        """
        Log the outcome; the error detail goes no further than this.

        The state change has already happened, so a logging failure is
        reported on the module logger and never alters the returned flag.
        """
        try:
            self._log_decision(operation, result, symbol)
        except Exception as e:
            self.logger.error(
                "Failed to log market decision",
                operation=operation,
                symbol=symbol,
                accepted=result.success,
                error=str(e),
                error_type=type(e).__name__
            )

    def _log_decision(self, operation: str, result: OperationResult, symbol: Optional[str]) -> None:
        if result.success:
            context = None
            if isinstance(result.value, TradeRecord):
                context = {
                    "timestamp": format_market_time(result.value.timestamp),
                    "quantity": result.value.quantity,
                    "direction": result.value.direction.value,
                    "unit_price": result.value.unit_price,
                }
            log_market_decision(self.market_logger, operation, True, symbol, "ok", context)
            return

        log_market_decision(
            self.market_logger,
            operation,
            False,
            symbol,
            str(result.error),
            {"error_type": result.error_type, **result.error.context},
        )

    def volume_weighted_price(self, kind: SecurityKind) -> float:
        """
        Volume weighted price of ``kind`` over the configured trailing window.

        Raises:
            NoTradesError: If no trade has been executed
            NoTradesInWindowError: If no trade of ``kind`` is inside the window
        """
        return self.ledger.volume_weighted_price(kind, self.clock(), self.vwap_window)

    def all_share_index(self) -> float:
        """
        All-Share Index: geometric mean of every trade price in the ledger.

        Raises:
            NoTradesError: If no trade has been executed
        """
        index = self.ledger.geometric_mean_price()
        self.logger.debug("Calculated All-Share Index", value=index, trade_count=len(self.ledger))
        return index

    def dividend_yield(self, symbol: str, price: float) -> float:
        """Dividend yield of a registered security at ``price``."""
        return self._require_security(symbol).dividend_yield(price)

    def pe_ratio(self, symbol: str, price: float) -> float:
        """P/E ratio of a registered security at ``price``."""
        return self._require_security(symbol).pe_ratio(price)

    def _require_security(self, symbol: str) -> Security:
        security = self._securities.get(symbol)
        if security is None:
            raise UnknownSecurityError(f"Security {symbol} is not registered", symbol=symbol)
        return security
