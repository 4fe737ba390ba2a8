"""
Paper execution service: simulates fills at the requested price.

No broker connection. Maintains internal cash and positions; every order and
its status is kept in an order log for reporting.
"""

from __future__ import annotations

import logging
import math
import uuid
from collections.abc import Callable, Sequence
from datetime import datetime

from mytrader.order import Order, Side

from mytrader.execution.service import ExecutionService
from mytrader.execution.types import ExecutedTrade, OrderStatus, OrderStatusKind, PortfolioState

logger = logging.getLogger(__name__)

FillObserver = Callable[[ExecutedTrade, PortfolioState], None]


class PaperExecutionService(ExecutionService):
    """
    Paper execution service. Fills buys and sells immediately at the given price.
    Rejects (without raising) on invalid price or volume, insufficient cash or insufficient position.
    Observers are called after each fill with the trade and the updated portfolio.
    """

    def __init__(
        self,
        initial_cash: float = 0.0,
        *,
        observers: Sequence[FillObserver] = (),
    ) -> None:
        self._cash = initial_cash
        self._positions: dict[str, int] = {}
        self._order_log: list[tuple[Order, OrderStatus]] = []
        self._trades: list[ExecutedTrade] = []
        self.observers: list[FillObserver] = list(observers)

    def buy(self, security: str, price: float, volume: int) -> None:
        self._submit(Order(security=security, side=Side.BUY, volume=volume, price=price, timestamp=datetime.now()))

    def sell(self, security: str, price: float, volume: int) -> None:
        self._submit(Order(security=security, side=Side.SELL, volume=volume, price=price, timestamp=datetime.now()))

    def _reject(self, order: Order, message: str) -> OrderStatus:
        status = OrderStatus(
            status=OrderStatusKind.REJECTED,
            message=message,
            timestamp=datetime.now(),
        )
        self._order_log.append((order, status))
        logger.info("Order rejected: %s %s %d @ %s: %s", order.side.value, order.security, order.volume, order.price, message)
        return status

    def _submit(self, order: Order) -> OrderStatus:
        if math.isnan(order.price) or math.isinf(order.price) or order.price <= 0:
            return self._reject(order, "Invalid price")
        if order.volume <= 0:
            return self._reject(order, "Invalid volume")

        cost = order.volume * order.price
        if order.side == Side.BUY:
            if self._cash < cost:
                return self._reject(order, "Insufficient cash")
            self._cash -= cost
            self._positions[order.security] = self._positions.get(order.security, 0) + order.volume
        else:
            pos = self._positions.get(order.security, 0)
            if pos < order.volume:
                return self._reject(order, "Insufficient position")
            self._cash += cost
            self._positions[order.security] = pos - order.volume
            if self._positions[order.security] == 0:
                del self._positions[order.security]

        order_id = f"paper-{uuid.uuid4().hex[:12]}"
        status = OrderStatus(
            status=OrderStatusKind.FILLED,
            order_id=order_id,
            fill_price=order.price,
            filled_volume=order.volume,
            timestamp=datetime.now(),
        )
        self._order_log.append((order, status))
        trade = ExecutedTrade(
            security=order.security,
            side=order.side,
            volume=order.volume,
            price=order.price,
            timestamp=status.timestamp,
            order_id=order_id,
        )
        self._trades.append(trade)
        logger.info("Filled %s: %s %d %s @ %s", order_id, order.side.value, order.volume, order.security, order.price)

        state = self.get_portfolio()
        for obs in self.observers:
            obs(trade, state)
        return status

    def get_portfolio(self) -> PortfolioState:
        """Return current simulated portfolio state."""
        return PortfolioState(cash=self._cash, positions=dict(self._positions))

    def get_order_log(self) -> list[tuple[Order, OrderStatus]]:
        """Return all submitted orders and their status."""
        return list(self._order_log)

    def get_trades(self) -> list[ExecutedTrade]:
        """Return filled orders as executed trades, oldest first."""
        return list(self._trades)
