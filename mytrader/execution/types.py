"""
Execution-layer types: order status, portfolio state, executed trade.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from mytrader.order import Side


class OrderStatusKind(Enum):
    """Outcome of an order sent to an execution service."""

    FILLED = "filled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class OrderStatus:
    """Result of submitting an order. Immutable."""

    status: OrderStatusKind
    order_id: str | None = None
    fill_price: float | None = None
    filled_volume: int = 0
    message: str | None = None
    timestamp: datetime | None = None


@dataclass
class PortfolioState:
    """Snapshot of cash and positions held by an execution service."""

    cash: float = 0.0
    positions: dict[str, int] = field(default_factory=dict)

    def position(self, security: str) -> int:
        """Volume held in security. 0 if not present."""
        return self.positions.get(security, 0)


@dataclass(frozen=True)
class ExecutedTrade:
    """Record of a filled order."""

    security: str
    side: Side
    volume: int
    price: float
    timestamp: datetime
    order_id: str | None = None
