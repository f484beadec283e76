"""Base exception for all stock market errors."""

from typing import Optional, Dict, Any


class MarketError(Exception):
    """Base class for every error raised by the market model."""

    recoverable = False

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
