"""
Price capabilities: listeners that react to price updates and sources that emit them.

Both are interfaces. Sources push (security, price) pairs to every registered
listener; how updates are obtained is up to the implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PriceListener(ABC):
    """Receives price updates from a PriceSource."""

    @abstractmethod
    def price_update(self, security: str | None, price: float | None) -> None:
        """
        React to one price update. Must tolerate malformed arguments
        (missing security, NaN price) without raising.
        """
        ...


class PriceSource(ABC):
    """Emits price updates to registered listeners."""

    @abstractmethod
    def add_price_listener(self, listener: PriceListener) -> None:
        """Register a listener to receive every subsequent update."""
        ...

    @abstractmethod
    def remove_price_listener(self, listener: PriceListener) -> None:
        """Stop notifying a previously registered listener."""
        ...
