"""
Price history replay on top of mytrader.

Loads recorded prices, pushes them through a PriceFeed to registered rules,
and reports the paper fills they produced.
"""

from replay.engine import ReplayEngine, ReplayResult
from replay.data_loader import load_csv, load_dataframe, to_price_updates
from replay.report import print_report, trades_frame

__all__ = [
    "ReplayEngine",
    "ReplayResult",
    "load_csv",
    "load_dataframe",
    "to_price_updates",
    "print_report",
    "trades_frame",
]
