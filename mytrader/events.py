"""
Price update events.

A PriceUpdate is an immutable data carrier for one observation from a feed.
It is not validated: listeners decide what to do with malformed values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PriceUpdate:
    """Latest observed price for a security."""

    security: str | None
    price: float | None
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if self.timestamp is not None and not isinstance(self.timestamp, datetime):
            object.__setattr__(self, "timestamp", datetime.fromisoformat(str(self.timestamp)))
