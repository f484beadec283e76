"""
Configuration for the stock market: dataclass defaults, YAML overrides and
validation.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationIssue

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "ValidationIssue",
    "get_default_config",
]
