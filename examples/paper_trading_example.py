"""
Paper trading example: BuyBelowPrice rules listening to a live-style price feed.

Shows: PriceFeed, BuyBelowPrice, PaperExecutionService with a fill observer,
and the order log after a handful of updates (including malformed ones).
"""

from __future__ import annotations

import logging
import math

from mytrader import BuyBelowPrice, PriceFeed
from mytrader.execution import ExecutedTrade, PaperExecutionService, PortfolioState


def print_fill_observer(trade: ExecutedTrade, portfolio: PortfolioState) -> None:
    """Observer: post-trade log."""
    print(f"  [Observer] FILL {trade.side.value} {trade.volume} {trade.security} @ {trade.price:.2f} (cash={portfolio.cash:,.2f})")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    execution = PaperExecutionService(initial_cash=8_000.0, observers=[print_fill_observer])
    feed = PriceFeed()
    feed.add_price_listener(BuyBelowPrice("IBM", 55.0, 55, execution))
    feed.add_price_listener(BuyBelowPrice("GOOG", 23.0, 10, execution))

    print("--- Publishing updates ---")
    for security, price in [
        ("IBM", 55.0),       # equal to threshold: no buy
        ("IBM", 54.9),       # below: buy
        ("GOOG", 28.0),      # above: no buy
        (None, 10.0),        # malformed: dropped
        ("IBM", math.nan),   # malformed: dropped
        ("GOOG", 22.0),      # below: buy
        ("IBM", 54.0),       # below again: buy again
        ("IBM", 50.0),       # insufficient cash: rejected by paper service
    ]:
        print(f"update {security} @ {price}")
        feed.publish(security, price)

    state = execution.get_portfolio()
    print(f"\nPortfolio: cash={state.cash:.2f}, positions={state.positions}")
    for order, status in execution.get_order_log():
        print(f"  Order log: {order.security} {order.side.value} {order.volume} @ {order.price} -> {status.status.value}")


if __name__ == "__main__":
    main()
