"""
Logging configuration and utilities for the stock market.
"""
from .config import (
    configure_logging,
    configure_market_logging,
    get_logger,
    get_market_logger,
    log_market_decision,
)

__all__ = [
    "configure_logging",
    "configure_market_logging",
    "get_logger",
    "get_market_logger",
    "log_market_decision",
]
