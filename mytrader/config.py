"""
Rule configuration from CSV or DataFrame.

One row per rule with columns security, price, volume (aliases accepted).
Each row is built through BuyBelowPrice, so invalid rows fail the same way
a hand-constructed rule would.
"""

from __future__ import annotations

import math
from pathlib import Path

import pandas as pd

from mytrader.execution.service import ExecutionService
from mytrader.monitor.buy_below_price import BuyBelowPrice

RULE_COLUMNS = ("security", "price", "volume")

_ALIASES = {
    "symbol": "security",
    "ticker": "security",
    "threshold": "price",
    "limit": "price",
    "qty": "volume",
    "quantity": "volume",
}


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase column names and map aliases to security/price/volume."""
    out = df.copy()
    out.columns = [str(c).lower().strip() for c in out.columns]
    return out.rename(columns={k: v for k, v in _ALIASES.items() if k in out.columns})


def _volume_cell(value: object) -> int | float:
    """Whole-number cells become int; anything else is passed through for BuyBelowPrice to reject."""
    if pd.isna(value):
        return math.nan
    value = float(value)
    return int(value) if value.is_integer() else value


def rules_from_dataframe(
    df: pd.DataFrame,
    execution_service: ExecutionService,
) -> list[BuyBelowPrice]:
    """
    Build one BuyBelowPrice per row, all sharing execution_service.

    Raises
    ------
    ValueError
        If a required column is missing, or a row has no security.
    ArithmeticError
        If a row has a NaN price, or a negative, blank or fractional volume.
    """
    out = _normalize_columns(df)
    missing = [c for c in RULE_COLUMNS if c not in out.columns]
    if missing:
        raise ValueError(f"Rule table is missing columns: {', '.join(missing)}")

    rules: list[BuyBelowPrice] = []
    for row in out[list(RULE_COLUMNS)].itertuples(index=False):
        security = None if pd.isna(row.security) else str(row.security)
        rules.append(
            BuyBelowPrice(
                security=security,
                price=float(row.price),
                volume=_volume_cell(row.volume),
                execution_service=execution_service,
            )
        )
    return rules


def load_rules(path: str | Path, execution_service: ExecutionService) -> list[BuyBelowPrice]:
    """Load rules from a CSV file. See rules_from_dataframe."""
    return rules_from_dataframe(pd.read_csv(path), execution_service)
