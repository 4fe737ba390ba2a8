"""
mytrader: price-threshold trading rules driven by streaming price updates.

Rules listen to a PriceSource and hand orders to an ExecutionService.
No broker integrations; sources and execution services are pluggable.
"""

__version__ = "0.1.0"

from mytrader.events import PriceUpdate
from mytrader.price import PriceListener, PriceSource
from mytrader.feed import PriceFeed
from mytrader.order import Order, Side
from mytrader.execution.service import ExecutionService
from mytrader.monitor.buy_below_price import BuyBelowPrice

__all__ = [
    "PriceUpdate",
    "PriceListener",
    "PriceSource",
    "PriceFeed",
    "Order",
    "Side",
    "ExecutionService",
    "BuyBelowPrice",
]
