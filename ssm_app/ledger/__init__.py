"""
Append-only trade ledger.
"""
from .trade_ledger import TradeLedger

__all__ = ["TradeLedger"]
