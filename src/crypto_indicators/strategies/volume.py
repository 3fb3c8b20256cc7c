"""Volume strategies."""

from __future__ import annotations

import pandas as pd

from crypto_indicators.domain.models import PriceSeries
from crypto_indicators.indicators import volume as indicators
from crypto_indicators.indicators.base import ema
from crypto_indicators.strategies.base import actions_from_conditions, sign_actions

MFI_OVERSOLD = 20.0
MFI_OVERBOUGHT = 80.0


def chaikin_money_flow_strategy(series: PriceSeries, period: int = 20) -> pd.Series:
    bars = series.to_frame()
    cmf = indicators.chaikin_money_flow(
        bars["high"],
        bars["low"],
        bars["close"],
        bars["volume"],
        period,
    )
    return sign_actions(cmf)


def ease_of_movement_strategy(series: PriceSeries, period: int = 14) -> pd.Series:
    bars = series.to_frame()
    emv = indicators.ease_of_movement(
        bars["high"],
        bars["low"],
        bars["close"],
        bars["volume"],
        period,
    )
    return sign_actions(emv)


def force_index_strategy(series: PriceSeries, period: int = 13) -> pd.Series:
    bars = series.to_frame()
    return sign_actions(indicators.force_index(bars["close"], bars["volume"], period))


def money_flow_index_strategy(series: PriceSeries, period: int = 14) -> pd.Series:
    bars = series.to_frame()
    mfi = indicators.money_flow_index(
        bars["high"],
        bars["low"],
        bars["close"],
        bars["volume"],
        period,
    )
    return actions_from_conditions(mfi <= MFI_OVERSOLD, mfi >= MFI_OVERBOUGHT)


def negative_volume_index_strategy(series: PriceSeries, period: int = 255) -> pd.Series:
    """BUY while NVI is above its EMA, SELL while below."""
    bars = series.to_frame()
    nvi = indicators.negative_volume_index(bars["close"], bars["volume"])
    signal = ema(nvi, period)
    return actions_from_conditions(nvi > signal, nvi < signal)


def volume_weighted_average_price_strategy(series: PriceSeries, period: int = 14) -> pd.Series:
    """BUY while price trades under VWAP, SELL while above."""
    bars = series.to_frame()
    vwap = indicators.volume_weighted_average_price(
        bars["high"],
        bars["low"],
        bars["close"],
        bars["volume"],
        period,
    )
    close = bars["close"]
    return actions_from_conditions(vwap > close, vwap < close)
