"""
Load price history from CSV or DataFrame for replay.

Output frames have columns security and price, in datetime order when a
datetime column or index is available.
"""

from __future__ import annotations

import math
from pathlib import Path

import pandas as pd

from mytrader.events import PriceUpdate

PRICE_COLUMNS = ("security", "price")


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Ensure columns are lowercase; map common aliases to security/price."""
    out = df.copy()
    out.columns = [str(c).lower().strip() for c in out.columns]
    renames = {
        "symbol": "security",
        "ticker": "security",
        "close": "price",
        "last": "price",
    }
    out = out.rename(columns={k: v for k, v in renames.items() if k in out.columns})
    missing = [c for c in PRICE_COLUMNS if c not in out.columns]
    if missing:
        raise ValueError(f"Price history is missing columns: {', '.join(missing)}")
    return out


def load_csv(
    path: str | Path,
    *,
    date_column: str | None = None,
    datetime_format: str | None = None,
) -> pd.DataFrame:
    """
    Load a price history from a CSV file.

    Parameters
    ----------
    path : str or Path
        Path to the CSV file.
    date_column : str, optional
        Column to use as datetime index. If None, 'date' or 'datetime' is used
        when present; otherwise rows keep file order.
    datetime_format : str, optional
        Format for parsing dates (e.g. '%Y-%m-%d %H:%M:%S').

    Returns
    -------
    pd.DataFrame
        Columns security and price; DatetimeIndex named 'datetime' when dates were found.
    """
    df = _normalize_columns(pd.read_csv(path))
    date_col = date_column.lower() if date_column else next(
        (c for c in ("date", "datetime", "timestamp") if c in df.columns), None
    )
    if date_col is not None and date_col in df.columns:
        df["datetime"] = pd.to_datetime(df[date_col], format=datetime_format)
        if date_col != "datetime":
            df = df.drop(columns=[date_col])
        df = df.set_index("datetime").sort_index(kind="stable")
    return df[list(PRICE_COLUMNS)]


def load_dataframe(
    df: pd.DataFrame,
    *,
    datetime_index: str | None = None,
) -> pd.DataFrame:
    """
    Normalize a DataFrame for replay: columns security and price.

    Parameters
    ----------
    df : pd.DataFrame
        Raw DataFrame (columns may be mixed case or aliased).
    datetime_index : str, optional
        Column name to use as index. If None, an existing DatetimeIndex is kept
        and sorted; any other index is left as is.

    Returns
    -------
    pd.DataFrame
        Normalized DataFrame with columns security and price.
    """
    out = _normalize_columns(df)
    if datetime_index is not None and datetime_index.lower() in out.columns:
        out["datetime"] = pd.to_datetime(out[datetime_index.lower()])
        out = out.set_index("datetime").sort_index(kind="stable")
    elif isinstance(out.index, pd.DatetimeIndex):
        out = out.sort_index(kind="stable")
        out.index.name = "datetime"
    return out[list(PRICE_COLUMNS)]


def to_price_updates(df: pd.DataFrame) -> list[PriceUpdate]:
    """
    Convert a normalized frame to PriceUpdate events, one per row.

    Missing securities become None and missing prices stay NaN, so the
    listeners see malformed rows exactly as a live feed would send them.
    """
    updates: list[PriceUpdate] = []
    has_times = isinstance(df.index, pd.DatetimeIndex)
    for ts, row in df.iterrows():
        security = None if pd.isna(row["security"]) else str(row["security"])
        price = math.nan if pd.isna(row["price"]) else float(row["price"])
        timestamp = ts.to_pydatetime() if has_times else None
        updates.append(PriceUpdate(security=security, price=price, timestamp=timestamp))
    return updates
