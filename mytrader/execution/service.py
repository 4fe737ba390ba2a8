"""
Execution service abstraction.

ExecutionService ABC: buy, sell. Rules call it when they trigger; implementations
decide how orders are placed (paper simulation here; a broker in production).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ExecutionService(ABC):
    """
    Places orders on behalf of rules. Calls are synchronous; any error raised
    here propagates back to the rule's caller.
    """

    @abstractmethod
    def buy(self, security: str, price: float, volume: int) -> None:
        """Buy volume lots of security at price."""
        ...

    @abstractmethod
    def sell(self, security: str, price: float, volume: int) -> None:
        """Sell volume lots of security at price."""
        ...
