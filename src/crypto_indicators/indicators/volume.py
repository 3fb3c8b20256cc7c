"""Volume indicators.

Most delegate to pandas_ta. The negative volume index and the moving VWAP
are computed here: pandas_ta's ``nvi`` accumulates volume-scaled rate of
change rather than compounding price change, and its ``vwap`` is anchored
to calendar periods instead of a moving bar window.
"""

from __future__ import annotations

import pandas as pd
import pandas_ta as ta

from crypto_indicators.indicators.base import aligned, msum, require_period, safe_divide

EMV_VOLUME_SCALE = 100_000_000
DEFAULT_NVI_START = 1000.0


def accumulation_distribution(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    volumes: pd.Series,
) -> pd.Series:
    return aligned(ta.ad(highs, lows, closings, volumes), closings.index)


def chaikin_money_flow(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    volumes: pd.Series,
    period: int = 20,
) -> pd.Series:
    result = ta.cmf(highs, lows, closings, volumes, length=require_period(period))
    return aligned(result, closings.index)


def ease_of_movement(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    volumes: pd.Series,
    period: int = 14,
) -> pd.Series:
    """Smoothed ratio of median-price movement to volume per unit of range."""
    result = ta.eom(
        highs,
        lows,
        closings,
        volumes,
        length=require_period(period),
        divisor=EMV_VOLUME_SCALE,
    )
    return aligned(result, closings.index)


def force_index(closings: pd.Series, volumes: pd.Series, period: int = 13) -> pd.Series:
    result = ta.efi(closings, volumes, length=require_period(period))
    return aligned(result, closings.index)


def money_flow_index(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    volumes: pd.Series,
    period: int = 14,
) -> pd.Series:
    result = ta.mfi(highs, lows, closings, volumes, length=require_period(period))
    return aligned(result, closings.index)


def negative_volume_index(
    closings: pd.Series,
    volumes: pd.Series,
    start: float = DEFAULT_NVI_START,
) -> pd.Series:
    """Cumulative price change counted only on bars where volume fell."""
    change = closings.pct_change()
    factor = (1 + change).where(volumes < volumes.shift(), 1.0).fillna(1.0)
    return start * factor.cumprod()


def on_balance_volume(closings: pd.Series, volumes: pd.Series) -> pd.Series:
    return aligned(ta.obv(closings, volumes), closings.index)


def volume_price_trend(closings: pd.Series, volumes: pd.Series) -> pd.Series:
    return aligned(ta.pvt(closings, volumes), closings.index)


def volume_weighted_average_price(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    volumes: pd.Series,
    period: int = 14,
) -> pd.Series:
    """Moving VWAP over the typical price."""
    typical_price = (highs + lows + closings) / 3
    return safe_divide(msum(typical_price * volumes, period), msum(volumes, period))
