"""
Replay report: print a summary of a ReplayResult and tabulate its trades.
"""

from __future__ import annotations

import pandas as pd

from replay.engine import ReplayResult

TRADE_COLUMNS = ["timestamp", "security", "side", "volume", "price", "order_id"]


def trades_frame(result: ReplayResult) -> pd.DataFrame:
    """One row per executed trade."""
    rows = [
        {
            "timestamp": t.timestamp,
            "security": t.security,
            "side": t.side.value,
            "volume": t.volume,
            "price": t.price,
            "order_id": t.order_id,
        }
        for t in result.trades
    ]
    return pd.DataFrame(rows, columns=TRADE_COLUMNS)


def print_report(result: ReplayResult) -> pd.DataFrame:
    """
    Print a replay summary.

    Returns
    -------
    pd.DataFrame
        The trades table (e.g. for programmatic use).
    """
    trades = trades_frame(result)
    print("--- Replay Summary ---")
    print(f"Updates:         {result.updates}")
    print(f"Trades:          {len(trades)}")
    if not trades.empty:
        spent = float((trades["volume"] * trades["price"]).sum())
        print(f"Notional:        {spent:,.2f}")
        for security, volume in trades.groupby("security")["volume"].sum().items():
            print(f"  {security}: {volume}")
    print(f"Cash:            {result.portfolio.cash:,.2f}")
    print(f"Positions:       {result.portfolio.positions}")
    print("----------------------")
    return trades
