"""Default configuration parameters for the stock market."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyticsParams:
    """Market analytics parameters."""
    vwap_window_minutes: float = 15.0    # Trailing window for volume weighted price


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    analytics: AnalyticsParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        analytics=AnalyticsParams(),
        logging=LoggingParams(),
    )
