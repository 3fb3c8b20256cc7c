"""Volatility strategies."""

from __future__ import annotations

import pandas as pd

from crypto_indicators.domain.models import PriceSeries
from crypto_indicators.indicators import volatility as indicators
from crypto_indicators.strategies.base import actions_from_conditions


def acceleration_bands_strategy(series: PriceSeries, period: int = 20) -> pd.Series:
    """Breakout: BUY at or above the upper band, SELL at or below the lower."""
    bars = series.to_frame()
    bands = indicators.acceleration_bands(bars["high"], bars["low"], bars["close"], period)
    close = bars["close"]
    return actions_from_conditions(close >= bands.upper, close <= bands.lower)


def bollinger_bands_strategy(
    series: PriceSeries,
    period: int = 20,
    std_dev: float = 2.0,
) -> pd.Series:
    """Mean reversion: BUY below the lower band, SELL above the upper."""
    close = series.to_frame()["close"]
    bands = indicators.bollinger_bands(close, period, std_dev)
    return actions_from_conditions(close < bands.lower, close > bands.upper)


def projection_oscillator_strategy(
    series: PriceSeries,
    period: int = 14,
    smooth: int = 3,
) -> pd.Series:
    bars = series.to_frame()
    result = indicators.projection_oscillator(
        bars["high"],
        bars["low"],
        bars["close"],
        period,
        smooth,
    )
    return actions_from_conditions(result.po > result.spo, result.po < result.spo)
