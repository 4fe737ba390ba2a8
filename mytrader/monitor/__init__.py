"""
Price monitors: PriceListener implementations that act on price updates.
"""

from mytrader.monitor.buy_below_price import BuyBelowPrice

__all__ = ["BuyBelowPrice"]
