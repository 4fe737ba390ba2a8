"""
Tests for execution layer: PaperExecutionService and types.
"""

import math

from mytrader.order import Side
from mytrader.execution import ExecutionService, PaperExecutionService
from mytrader.execution.types import OrderStatusKind


def test_paper_service_is_execution_service():
    assert isinstance(PaperExecutionService(), ExecutionService)


def test_paper_get_portfolio_initial():
    svc = PaperExecutionService(initial_cash=50_000.0)
    state = svc.get_portfolio()
    assert state.cash == 50_000.0
    assert state.positions == {}
    assert state.position("IBM") == 0


def test_paper_buy_fill():
    svc = PaperExecutionService(initial_cash=100_000.0)
    svc.buy("IBM", 54.0, 10)
    state = svc.get_portfolio()
    assert state.cash == 100_000.0 - 10 * 54.0
    assert state.position("IBM") == 10
    [(order, status)] = svc.get_order_log()
    assert order.side == Side.BUY
    assert status.status == OrderStatusKind.FILLED
    assert status.fill_price == 54.0
    assert status.filled_volume == 10
    assert status.order_id.startswith("paper-")


def test_paper_sell_fill():
    svc = PaperExecutionService(initial_cash=20 * 50.0)
    svc.buy("IBM", 50.0, 20)
    svc.sell("IBM", 60.0, 20)
    state = svc.get_portfolio()
    assert state.position("IBM") == 0
    assert "IBM" not in state.positions
    assert state.cash == 20 * 60.0


def test_paper_rejects_insufficient_cash():
    svc = PaperExecutionService(initial_cash=100.0)
    svc.buy("IBM", 55.0, 100)
    [(_, status)] = svc.get_order_log()
    assert status.status == OrderStatusKind.REJECTED
    assert status.message == "Insufficient cash"
    assert svc.get_portfolio().cash == 100.0
    assert svc.get_trades() == []


def test_paper_rejects_insufficient_position():
    svc = PaperExecutionService(initial_cash=100.0)
    svc.sell("IBM", 55.0, 1)
    [(_, status)] = svc.get_order_log()
    assert status.message == "Insufficient position"


def test_paper_rejects_invalid_price():
    svc = PaperExecutionService(initial_cash=100.0)
    svc.buy("IBM", 0.0, 1)
    svc.buy("IBM", math.nan, 1)
    assert [s.message for _, s in svc.get_order_log()] == ["Invalid price", "Invalid price"]


def test_paper_observers_called_on_fill():
    seen = []
    svc = PaperExecutionService(
        initial_cash=1_000.0,
        observers=[lambda trade, state: seen.append((trade.security, trade.volume, state.position("IBM")))],
    )
    svc.buy("IBM", 10.0, 5)
    svc.buy("IBM", 10.0, 1_000)  # rejected: no observer call
    assert seen == [("IBM", 5, 5)]
    [trade] = svc.get_trades()
    assert trade.price == 10.0
    assert trade.side == Side.BUY


def test_paper_rejects_zero_volume():
    svc = PaperExecutionService(initial_cash=100.0)
    svc.buy("IBM", 10.0, 0)
    svc.sell("IBM", 10.0, 0)
    assert [s.message for _, s in svc.get_order_log()] == ["Invalid volume", "Invalid volume"]
    assert svc.get_portfolio().positions == {}
    assert svc.get_trades() == []


def test_paper_rejects_infinite_price():
    svc = PaperExecutionService(initial_cash=100.0)
    svc.buy("IBM", math.inf, 0)
    svc.buy("IBM", math.inf, 1)
    assert [s.message for _, s in svc.get_order_log()] == ["Invalid price", "Invalid price"]
    assert svc.get_portfolio().cash == 100.0
