"""
Market domain models: securities, trade records and operation results.
"""
from .results import OperationResult
from .security import (
    AnySecurity,
    OrdinaryShare,
    PreferentialShare,
    Security,
    SecurityKind,
    create_security,
)
from .trade import TradeDirection, TradeRecord, compare_trades

__all__ = [
    "AnySecurity",
    "OperationResult",
    "OrdinaryShare",
    "PreferentialShare",
    "Security",
    "SecurityKind",
    "TradeDirection",
    "TradeRecord",
    "compare_trades",
    "create_security",
]
