"""Shared helpers for the indicator functions.

pandas_ta returns ``None`` when a series is shorter than the requested
window. Those results are turned into all-NaN series so every indicator
keeps one value per input bar.
"""

from __future__ import annotations

import numpy as np
import pandas as pd


def require_period(period: int, name: str = "period") -> int:
    # pandas_ta silently swaps non-positive lengths for its own defaults
    if period <= 0:
        raise ValueError(f"{name} must be positive")
    return period


def aligned(result: pd.Series | None, index: pd.Index) -> pd.Series:
    """Reindex a pandas_ta result onto the input bars."""
    if result is None:
        return pd.Series(np.nan, index=index, dtype=float)
    return result.reindex(index).astype(float)


def column(frame: pd.DataFrame | None, prefix: str, index: pd.Index) -> pd.Series:
    """Pick the pandas_ta output column whose name starts with ``prefix``."""
    if frame is None:
        return aligned(None, index)
    for name in frame.columns:
        if str(name).startswith(prefix):
            return aligned(frame[name], index)
    raise KeyError(f"pandas_ta result has no {prefix}* column: {list(frame.columns)}")


def msum(values: pd.Series, period: int) -> pd.Series:
    """Moving sum over windows filled from the start of the series."""
    return values.rolling(window=require_period(period), min_periods=1).sum()


def ema(values: pd.Series, period: int) -> pd.Series:
    """Unseeded exponential moving average (span ``period``)."""
    return values.ewm(span=require_period(period), adjust=False).mean()


def safe_divide(numerator: pd.Series, denominator: pd.Series) -> pd.Series:
    """Element-wise division, NaN where the denominator is zero."""
    return numerator / denominator.where(denominator != 0)
