"""
Replay example: load rules and a price history from CSV and replay them.

Run from the repo root: python examples/replay_example.py
"""

from pathlib import Path

from mytrader import PriceFeed
from mytrader.config import load_rules
from mytrader.execution import PaperExecutionService
from replay import ReplayEngine, load_csv, print_report


def main() -> None:
    data_dir = Path(__file__).resolve().parent / "data"

    execution = PaperExecutionService(initial_cash=50_000.0)
    feed = PriceFeed()
    for rule in load_rules(data_dir / "sample_rules.csv", execution):
        feed.add_price_listener(rule)

    prices = load_csv(data_dir / "sample_prices.csv")
    result = ReplayEngine(feed, execution).run(prices)
    trades = print_report(result)
    if not trades.empty:
        print(trades.to_string(index=False))


if __name__ == "__main__":
    main()
