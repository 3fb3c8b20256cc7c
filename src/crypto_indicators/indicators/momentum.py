"""Momentum indicators backed by pandas_ta."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd
import pandas_ta as ta

from crypto_indicators.indicators.base import aligned, column, require_period
from crypto_indicators.indicators.volume import accumulation_distribution


@dataclass(frozen=True)
class ChaikinOscillatorResult:
    ad: pd.Series
    cmo: pd.Series


@dataclass(frozen=True)
class IchimokuCloudResult:
    conversion_line: pd.Series
    base_line: pd.Series
    leading_span_a: pd.Series
    leading_span_b: pd.Series
    lagging_span: pd.Series


@dataclass(frozen=True)
class PercentageOscillatorResult:
    oscillator: pd.Series
    signal: pd.Series
    histogram: pd.Series


@dataclass(frozen=True)
class StochasticOscillatorResult:
    k: pd.Series
    d: pd.Series


def awesome_oscillator(
    highs: pd.Series,
    lows: pd.Series,
    fast_period: int = 5,
    slow_period: int = 34,
) -> pd.Series:
    """Difference between fast and slow SMAs of the median price."""
    result = ta.ao(
        highs,
        lows,
        fast=require_period(fast_period, "fast_period"),
        slow=require_period(slow_period, "slow_period"),
    )
    return aligned(result, highs.index)


def chaikin_oscillator(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    volumes: pd.Series,
    fast_period: int = 3,
    slow_period: int = 10,
) -> ChaikinOscillatorResult:
    """Fast EMA minus slow EMA of the accumulation/distribution line."""
    cmo = ta.adosc(
        highs,
        lows,
        closings,
        volumes,
        fast=require_period(fast_period, "fast_period"),
        slow=require_period(slow_period, "slow_period"),
    )
    return ChaikinOscillatorResult(
        ad=accumulation_distribution(highs, lows, closings, volumes),
        cmo=aligned(cmo, closings.index),
    )


def ichimoku_cloud(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    conversion_period: int = 9,
    base_period: int = 26,
    span_period: int = 52,
) -> IchimokuCloudResult:
    """Ichimoku Kinko Hyo lines.

    Leading spans are projected ``base_period`` bars forward and the lagging
    span ``base_period`` bars back. Projections past the last bar are dropped.
    """
    result = ta.ichimoku(
        highs,
        lows,
        closings,
        tenkan=require_period(conversion_period, "conversion_period"),
        kijun=require_period(base_period, "base_period"),
        senkou=require_period(span_period, "span_period"),
    )
    frame = result[0] if isinstance(result, tuple) else result
    index = closings.index
    return IchimokuCloudResult(
        conversion_line=column(frame, "ITS_", index),
        base_line=column(frame, "IKS_", index),
        leading_span_a=column(frame, "ISA_", index),
        leading_span_b=column(frame, "ISB_", index),
        lagging_span=column(frame, "ICS_", index),
    )


def percentage_price_oscillator(
    closings: pd.Series,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> PercentageOscillatorResult:
    frame = ta.ppo(
        closings,
        fast=require_period(fast_period, "fast_period"),
        slow=require_period(slow_period, "slow_period"),
        signal=require_period(signal_period, "signal_period"),
        mamode="ema",
    )
    return PercentageOscillatorResult(
        oscillator=column(frame, "PPO_", closings.index),
        signal=column(frame, "PPOs_", closings.index),
        histogram=column(frame, "PPOh_", closings.index),
    )


def percentage_volume_oscillator(
    volumes: pd.Series,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> PercentageOscillatorResult:
    frame = ta.pvo(
        volumes,
        fast=require_period(fast_period, "fast_period"),
        slow=require_period(slow_period, "slow_period"),
        signal=require_period(signal_period, "signal_period"),
    )
    return PercentageOscillatorResult(
        oscillator=column(frame, "PVO_", volumes.index),
        signal=column(frame, "PVOs_", volumes.index),
        histogram=column(frame, "PVOh_", volumes.index),
    )


def price_rate_of_change(closings: pd.Series, period: int = 14) -> pd.Series:
    """Percent change against the close ``period`` bars earlier."""
    return aligned(ta.roc(closings, length=require_period(period)), closings.index)


def relative_strength_index(closings: pd.Series, period: int = 14) -> pd.Series:
    """Wilder-smoothed RSI."""
    return aligned(ta.rsi(closings, length=require_period(period)), closings.index)


def stochastic_oscillator(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    period: int = 14,
    signal_period: int = 3,
) -> StochasticOscillatorResult:
    # smooth_k=1 keeps %K unsmoothed; %D is the SMA of %K
    frame = ta.stoch(
        highs,
        lows,
        closings,
        k=require_period(period),
        d=require_period(signal_period, "signal_period"),
        smooth_k=1,
    )
    return StochasticOscillatorResult(
        k=column(frame, "STOCHk_", closings.index),
        d=column(frame, "STOCHd_", closings.index),
    )


def williams_r(
    highs: pd.Series,
    lows: pd.Series,
    closings: pd.Series,
    period: int = 14,
) -> pd.Series:
    result = ta.willr(highs, lows, closings, length=require_period(period))
    return aligned(result, closings.index)


def price_momentum(closings: pd.Series, period: int = 14) -> pd.Series:
    """Absolute price change over ``period`` bars."""
    return aligned(ta.mom(closings, length=require_period(period)), closings.index)
