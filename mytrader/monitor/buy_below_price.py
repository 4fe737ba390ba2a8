"""
Buy-below-price rule.

Listens to price updates and buys a fixed volume of one security every time
its price is observed strictly below a threshold. Configuration is validated
on construction; malformed updates from the feed are dropped silently.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from mytrader.execution.service import ExecutionService
from mytrader.price import PriceListener

logger = logging.getLogger(__name__)


def _require_non_nan(value: float, message: str) -> None:
    """Raise ArithmeticError if value is not a number."""
    if math.isnan(value):
        raise ArithmeticError(message)


def _require_unsigned(value: int, message: str) -> None:
    """Raise ArithmeticError if value is negative, NaN or not a whole number."""
    if not value >= 0:
        raise ArithmeticError(message)
    if isinstance(value, float) and not value.is_integer():
        raise ArithmeticError(message)


@dataclass(frozen=True, eq=False)
class BuyBelowPrice(PriceListener):
    """
    Buy `volume` lots of `security` whenever an update prices it below `price`.

    Every qualifying update triggers its own buy; there is no memory of
    previous triggers. Errors raised by the execution service propagate to
    whoever drives the price updates.
    """

    security: str
    price: float
    volume: int
    execution_service: ExecutionService

    def __post_init__(self) -> None:
        if self.execution_service is None:
            raise ValueError("ExecutionService was null")
        if self.security is None:
            raise ValueError("Security was null")
        _require_non_nan(self.price, "Price is not a number")
        _require_unsigned(self.volume, "Volume shouldn't be less than 0")

    def price_update(self, security: str | None, price: float | None) -> None:
        if security is None or price is None or math.isnan(price):
            logger.debug("Ignoring malformed price update: security=%r price=%r", security, price)
            return
        if not self.can_check_price_for(security):
            return
        if price < self.price:
            self.buy_at_price(price)

    def can_check_price_for(self, security: str | None) -> bool:
        """True if the update is for the security this rule monitors."""
        return security is not None and security == self.security

    def buy_at_price(self, price: float) -> None:
        """Send the configured buy order to the execution service at price."""
        logger.info(
            "%s below %s: buying %d @ %s", self.security, self.price, self.volume, price
        )
        self.execution_service.buy(self.security, price, self.volume)
