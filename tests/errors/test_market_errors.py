"""
Tests for the market error hierarchy and the propagation policy.

Validation and analytics errors reach the immediate caller; registration and
trade execution absorb them into a boolean result.
"""

from datetime import datetime, timezone

import pytest

from ssm_app.errors import (
    AnalyticsError,
    InvalidQueryError,
    InvalidSecurityError,
    InvalidTradeError,
    MarketError,
    NoTradesError,
    NoTradesInWindowError,
    UnknownSecurityError,
    UnsupportedOperationError,
    ValidationError,
)
from ssm_app.models import SecurityKind, TradeDirection


class TestErrorClassification:
    """Test error classification system."""

    def test_validation_error_hierarchy(self):
        """Test that validation errors are recoverable and carry the field."""
        error = InvalidSecurityError("bad par", symbol="TEA", field="par_value", value=0.0)
        assert isinstance(error, ValidationError)
        assert isinstance(error, MarketError)
        assert error.recoverable is True
        assert error.symbol == "TEA"
        assert error.field == "par_value"
        assert error.value == 0.0
        assert error.context == {}

        assert isinstance(InvalidTradeError("bad qty"), ValidationError)
        assert isinstance(UnknownSecurityError("missing", symbol="XYZ"), InvalidQueryError)

    def test_analytics_error_hierarchy(self):
        """Test that analytics errors are not recoverable."""
        cutoff = datetime(2023, 1, 1, tzinfo=timezone.utc)
        error = NoTradesInWindowError("none", kind="ordinary", cutoff=cutoff,
                                      context={"trade_count": 3})
        assert isinstance(error, AnalyticsError)
        assert error.recoverable is False
        assert error.kind == "ordinary"
        assert error.cutoff == cutoff
        assert error.context == {"trade_count": 3}

        assert NoTradesError("empty", metric_name="all_share_index").metric_name == "all_share_index"
        assert UnsupportedOperationError("no", operation="pe_ratio").operation == "pe_ratio"

    def test_unknown_security_fields(self):
        """Test UnknownSecurityError fills field and value from the symbol."""
        error = UnknownSecurityError("missing", symbol="XYZ")
        assert error.field == "symbol"
        assert error.value == "XYZ"


class TestPropagationPolicy:
    """Test where errors are absorbed and where they propagate."""

    def test_boundary_operations_never_raise(self, market):
        """Test register_security and execute_trade only return booleans."""
        assert market.register_security(object()) is False
        assert market.execute_trade("TEA", 0, TradeDirection.BUY, 10.0) is False
        assert market.execute_trade("TEA", 1, "hold", 10.0) is False
        assert market.execute_trade(None, 1, TradeDirection.BUY, 10.0) is False

    def test_analytics_propagate(self, market):
        """Test analytics errors reach the caller unchanged."""
        with pytest.raises(NoTradesError):
            market.all_share_index()
        with pytest.raises(NoTradesError):
            market.volume_weighted_price(SecurityKind.PREFERENTIAL)

    def test_query_errors_propagate(self, market):
        """Test security query errors reach the caller unchanged."""
        with pytest.raises(InvalidQueryError):
            market.dividend_yield("TEA", 0.0)
        with pytest.raises(UnsupportedOperationError):
            market.pe_ratio("TEA", 10.0)
