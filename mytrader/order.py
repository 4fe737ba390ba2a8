"""
Order: a buy or sell instruction as seen by an execution service.

Immutable. Carries the security, direction, volume and price of the instruction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Side(Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Order:
    """An order as submitted to an execution service. No fill state here."""

    security: str
    side: Side
    volume: int
    price: float
    timestamp: datetime | None = None
