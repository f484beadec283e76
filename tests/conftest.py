"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone

from ssm_app.market import StockMarket
from ssm_app.models import SecurityKind, create_security


class FakeClock:
    """Controllable clock returning a fixed UTC time until advanced."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def start_time() -> datetime:
    """Reference market time for tests."""
    return datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(start_time) -> FakeClock:
    """Clock frozen at start_time."""
    return FakeClock(start_time)


@pytest.fixture
def sample_securities():
    """Global Beverage Corporation Exchange sample data."""
    return [
        create_security("TEA", SecurityKind.ORDINARY, 100.0, 0.0),
        create_security("POP", SecurityKind.ORDINARY, 100.0, 8.0),
        create_security("ALE", SecurityKind.ORDINARY, 60.0, 23.0),
        create_security("GIN", SecurityKind.PREFERENTIAL, 100.0, 8.0, 0.02),
        create_security("JOE", SecurityKind.ORDINARY, 250.0, 13.0),
    ]


@pytest.fixture
def market(clock, sample_securities, tmp_path) -> StockMarket:
    """Market with the sample securities registered and no trades."""
    stock_market = StockMarket(clock=clock, config_dir=tmp_path)
    for security in sample_securities:
        assert stock_market.register_security(security)
    return stock_market
