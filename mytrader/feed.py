"""
PriceFeed: in-memory, single-threaded price source.

Notifies listeners in registration order. No async, no I/O; the caller drives
publishing (e.g. from a market data callback or a replay).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mytrader.events import PriceUpdate
from mytrader.price import PriceListener, PriceSource

logger = logging.getLogger(__name__)


class PriceFeed(PriceSource):
    """
    Deterministic price source. Every published update is passed to each
    registered listener in order. Listener errors propagate to the publisher.
    """

    def __init__(self) -> None:
        self._listeners: list[PriceListener] = []

    @property
    def listeners(self) -> list[PriceListener]:
        return list(self._listeners)

    def add_price_listener(self, listener: PriceListener) -> None:
        """Register a listener. Registering twice means being notified twice."""
        self._listeners.append(listener)

    def remove_price_listener(self, listener: PriceListener) -> None:
        """Remove the first registration of listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)
        else:
            logger.debug("remove_price_listener: %r was not registered", listener)

    def publish(self, security: str | None, price: float | None) -> None:
        """Send one price update to all listeners in order."""
        logger.debug("Publishing %s @ %s to %d listener(s)", security, price, len(self._listeners))
        for listener in list(self._listeners):
            listener.price_update(security, price)

    def dispatch(self, update: PriceUpdate) -> None:
        self.publish(update.security, update.price)

    def run(self, updates: Iterable[PriceUpdate]) -> int:
        """Dispatch a sequence of updates in order. Returns how many were dispatched."""
        count = 0
        for update in updates:
            self.dispatch(update)
            count += 1
        return count
