"""Momentum strategies."""

from __future__ import annotations

import pandas as pd

from crypto_indicators.domain.models import PriceSeries
from crypto_indicators.indicators import momentum as indicators
from crypto_indicators.strategies.base import actions_from_conditions, sign_actions

RSI2_OVERSOLD = 10.0
RSI2_OVERBOUGHT = 90.0
STOCHASTIC_OVERSOLD = 20.0
STOCHASTIC_OVERBOUGHT = 80.0
WILLIAMS_R_OVERSOLD = -80.0
WILLIAMS_R_OVERBOUGHT = -20.0


def momentum_strategy(series: PriceSeries, period: int = 14) -> pd.Series:
    bars = series.to_frame()
    return sign_actions(indicators.price_momentum(bars["close"], period))


def awesome_oscillator_strategy(
    series: PriceSeries,
    fast_period: int = 5,
    slow_period: int = 34,
) -> pd.Series:
    bars = series.to_frame()
    ao = indicators.awesome_oscillator(bars["high"], bars["low"], fast_period, slow_period)
    return sign_actions(ao)


def ichimoku_cloud_strategy(
    series: PriceSeries,
    conversion_period: int = 9,
    base_period: int = 26,
    span_period: int = 52,
) -> pd.Series:
    """BUY above the cloud, SELL below it."""
    bars = series.to_frame()
    cloud = indicators.ichimoku_cloud(
        bars["high"],
        bars["low"],
        bars["close"],
        conversion_period,
        base_period,
        span_period,
    )
    close = bars["close"]
    above = (close > cloud.leading_span_a) & (close > cloud.leading_span_b)
    below = (close < cloud.leading_span_a) & (close < cloud.leading_span_b)
    return actions_from_conditions(above, below)


def rsi2_strategy(series: PriceSeries, period: int = 2) -> pd.Series:
    """Short-period RSI mean reversion."""
    rsi = indicators.relative_strength_index(series.to_frame()["close"], period)
    return actions_from_conditions(rsi < RSI2_OVERSOLD, rsi > RSI2_OVERBOUGHT)


def stochastic_oscillator_strategy(
    series: PriceSeries,
    period: int = 14,
    signal_period: int = 3,
) -> pd.Series:
    bars = series.to_frame()
    stoch = indicators.stochastic_oscillator(
        bars["high"],
        bars["low"],
        bars["close"],
        period,
        signal_period,
    )
    buy = (stoch.k < STOCHASTIC_OVERSOLD) & (stoch.d < STOCHASTIC_OVERSOLD)
    sell = (stoch.k > STOCHASTIC_OVERBOUGHT) & (stoch.d > STOCHASTIC_OVERBOUGHT)
    return actions_from_conditions(buy, sell)


def williams_r_strategy(series: PriceSeries, period: int = 14) -> pd.Series:
    bars = series.to_frame()
    wr = indicators.williams_r(bars["high"], bars["low"], bars["close"], period)
    return actions_from_conditions(wr <= WILLIAMS_R_OVERSOLD, wr >= WILLIAMS_R_OVERBOUGHT)
