#!/usr/bin/env python3
"""
Basic Usage Example - Super Simple Stock Market

This script demonstrates the basic usage of the stock market with the
Global Beverage Corporation Exchange sample data. It shows how to:
- Configure logging from the market configuration
- Register ordinary and preferential securities
- Query dividend yield and P/E ratio
- Record trades and compute the volume weighted price and All-Share Index

Run: python examples/basic_usage.py
"""

from datetime import datetime, timedelta, timezone

from ssm_app.errors import AnalyticsError
from ssm_app.logging import configure_market_logging
from ssm_app.market import StockMarket
from ssm_app.models import SecurityKind, TradeDirection, create_security


class SimulatedClock:
    """Clock that moves forward one second per call."""

    def __init__(self) -> None:
        self.now = datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def main():
    """Main demo function."""
    print("📈 Super Simple Stock Market - Basic Usage Demo")
    print("=" * 60)

    clock = SimulatedClock()
    market = StockMarket(clock=clock)
    configure_market_logging(market.config)

    print("1. Registering securities...")
    securities = [
        create_security("TEA", SecurityKind.ORDINARY, 100.0, 0.0),
        create_security("POP", SecurityKind.ORDINARY, 100.0, 8.0),
        create_security("ALE", SecurityKind.ORDINARY, 60.0, 23.0),
        create_security("GIN", SecurityKind.PREFERENTIAL, 100.0, 8.0, 0.02),
        create_security("JOE", SecurityKind.ORDINARY, 250.0, 13.0),
    ]
    for security in securities:
        market.register_security(security)
    print(f"   Registered {market.security_count()} securities")

    # Duplicate registration is absorbed, not raised
    accepted = market.register_security(create_security("TEA", SecurityKind.ORDINARY, 1.0, 0.0))
    print(f"   Duplicate TEA accepted: {accepted}")
    print()

    print("2. Dividend yield and P/E ratio at 40p...")
    for security in securities:
        line = f"   {security.symbol}: yield={security.dividend_yield(40.0):.4f}"
        if security.kind is SecurityKind.PREFERENTIAL:
            line += f" P/E={security.pe_ratio(40.0):.2f}"
        print(line)
    print()

    print("3. Recording trades...")
    for symbol, quantity, price in [("TEA", 1, 10.0), ("POP", 2, 20.0), ("ALE", 3, 30.0),
                                    ("GIN", 4, 40.0), ("JOE", 5, 50.0)]:
        ok = market.execute_trade(symbol, quantity, TradeDirection.BUY, price)
        print(f"   {symbol} x{quantity} @ {price}p -> {'recorded' if ok else 'rejected'}")

    ok = market.execute_trade("XYZ", 1, TradeDirection.SELL, 10.0)
    print(f"   XYZ (unregistered) -> {'recorded' if ok else 'rejected'}")
    print(f"   Trades in ledger: {market.trade_count()}")
    print()

    print("4. Market analytics...")
    for kind in SecurityKind:
        try:
            print(f"   VWP {kind.value}: {market.volume_weighted_price(kind):.4f}p")
        except AnalyticsError as e:
            print(f"   VWP {kind.value}: unavailable ({e})")
    print(f"   All-Share Index: {market.all_share_index():.4f}")


if __name__ == "__main__":
    main()
