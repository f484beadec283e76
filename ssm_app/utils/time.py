"""
Time utilities for trade timestamps and trailing windows.

The market never reads the wall clock directly. It calls a ``Clock``, which
defaults to :func:`utc_now`, so that tests and replays can supply their own
notion of "now".
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(ts: datetime) -> datetime:
    """
    Normalize a timestamp to aware UTC.

    Naive datetimes are treated as already being in UTC.

    Args:
        ts: Timestamp to normalize

    Returns:
        The same instant as a UTC datetime
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def window_cutoff(now: datetime, window: timedelta) -> datetime:
    """
    Oldest timestamp still inside a trailing window ending at ``now``.

    Args:
        now: End of the window
        window: Window length, must not be negative

    Returns:
        ``now - window``
    """
    if window < timedelta(0):
        raise ValueError(f"window must not be negative, got {window}")
    return ensure_utc(now) - window


def format_market_time(market_ts: datetime) -> str:
    """ISO8601 representation used in log records."""
    return ensure_utc(market_ts).isoformat()

