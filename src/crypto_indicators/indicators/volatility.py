"""Volatility indicators.

Band envelopes come from pandas_ta; the projection oscillator has no
pandas_ta counterpart and is computed here.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

import numpy as np
import pandas as pd
import pandas_ta as ta

from crypto_indicators.indicators.base import aligned, column, ema, require_period, safe_divide


@dataclass(frozen=True)
class BandsResult:
    upper: pd.Series
    middle: pd.Series
    lower: pd.Series


@dataclass(frozen=True)
class ProjectionOscillatorResult:
    po: pd.Series
    spo: pd.Series


def acceleration_bands(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    period: int = 20,
    multiplier: float = 4.0,
) -> BandsResult:
    """Price envelope widened by the relative bar range."""
    frame = ta.accbands(highs, lows, closings, length=require_period(period), c=multiplier)
    index = closings.index
    return BandsResult(
        upper=column(frame, "ACCBU_", index),
        middle=column(frame, "ACCBM_", index),
        lower=column(frame, "ACCBL_", index),
    )


def bollinger_bands(closings: pd.Series, period: int = 20, std_dev: float = 2.0) -> BandsResult:
    """SMA envelope of ``std_dev`` population standard deviations."""
    if std_dev <= 0:
        raise ValueError("std_dev must be positive")
    length = require_period(period)
    middle = aligned(ta.sma(closings, length=length), closings.index)
    if length == 1:
        # ta.stdev treats a one-bar window as "use the default length"
        return BandsResult(upper=middle, middle=middle, lower=middle)
    width = aligned(ta.stdev(closings, length=length, ddof=0), closings.index) * std_dev
    return BandsResult(upper=middle + width, middle=middle, lower=middle - width)


def _projected_extreme(values: np.ndarray, *, upper: bool) -> float:
    positions = np.arange(len(values), dtype=float)
    slope = np.polyfit(positions, values, 1)[0]
    projected = values + slope * (positions[-1] - positions)
    return float(projected.max() if upper else projected.min())


def projection_oscillator(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    period: int = 14,
    smooth: int = 3,
) -> ProjectionOscillatorResult:
    """Close position inside regression-projected high/low bands.

    Each past high and low in the window is carried forward to the current
    bar along its window's least-squares slope. The first bar has no slope
    and yields NaN.
    """
    window = require_period(period)
    projected_upper = highs.rolling(window=window, min_periods=2).apply(
        partial(_projected_extreme, upper=True),
        raw=True,
    )
    projected_lower = lows.rolling(window=window, min_periods=2).apply(
        partial(_projected_extreme, upper=False),
        raw=True,
    )
    po = safe_divide(closings - projected_lower, projected_upper - projected_lower) * 100
    return ProjectionOscillatorResult(po=po, spo=ema(po, smooth))
