"""
Replay engine: pushes a recorded price history through a PriceFeed.

Listeners (e.g. BuyBelowPrice rules) are registered on the feed by the caller;
orders land in a PaperExecutionService, whose fills make up the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pandas as pd

from mytrader.feed import PriceFeed
from mytrader.execution.paper import PaperExecutionService
from mytrader.execution.types import ExecutedTrade, PortfolioState

from replay.data_loader import load_dataframe, to_price_updates

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    """Result of a replay: updates dispatched, trades filled during the run, final portfolio."""

    updates: int
    trades: list[ExecutedTrade] = field(default_factory=list)
    portfolio: PortfolioState = field(default_factory=PortfolioState)


class ReplayEngine:
    """
    Replays price history in order through a feed and collects the resulting fills.
    """

    def __init__(self, feed: PriceFeed, execution: PaperExecutionService) -> None:
        self.feed = feed
        self.execution = execution

    def run(self, data: pd.DataFrame) -> ReplayResult:
        """
        Dispatch every row of data as a price update.

        Parameters
        ----------
        data : pd.DataFrame
            Price history with security and price columns (aliases accepted).

        Returns
        -------
        ReplayResult
            Number of updates dispatched, trades filled by this run, and final portfolio.
        """
        trades_before = len(self.execution.get_trades())
        updates = to_price_updates(load_dataframe(data))
        count = self.feed.run(updates)
        trades = self.execution.get_trades()[trades_before:]
        logger.info("Replayed %d update(s), %d fill(s)", count, len(trades))
        return ReplayResult(
            updates=count,
            trades=trades,
            portfolio=self.execution.get_portfolio(),
        )
