"""
Execution layer: ExecutionService interface and paper execution.

Rules hand buy instructions to an ExecutionService; the paper service simulates
fills and keeps an order log.
"""

from mytrader.execution.service import ExecutionService
from mytrader.execution.paper import PaperExecutionService
from mytrader.execution.types import ExecutedTrade, OrderStatus, OrderStatusKind, PortfolioState

__all__ = [
    "ExecutionService",
    "PaperExecutionService",
    "ExecutedTrade",
    "OrderStatus",
    "OrderStatusKind",
    "PortfolioState",
]
