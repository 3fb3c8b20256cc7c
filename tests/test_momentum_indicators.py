from __future__ import annotations

import math

import pandas as pd
import pytest

from crypto_indicators.indicators.momentum import (
    awesome_oscillator,
    chaikin_oscillator,
    ichimoku_cloud,
    percentage_price_oscillator,
    percentage_volume_oscillator,
    price_momentum,
    price_rate_of_change,
    relative_strength_index,
    stochastic_oscillator,
    williams_r,
)


def _series(values: list[float]) -> pd.Series:
    return pd.Series(values, dtype=float)


def test_awesome_oscillator_is_fast_minus_slow_median_sma() -> None:
    highs = _series([2, 4, 6, 8])
    lows = _series([0, 2, 4, 6])

    result = awesome_oscillator(highs, lows, fast_period=1, slow_period=2)

    assert math.isnan(result.iloc[0])
    assert result.iloc[1:].tolist() == pytest.approx([1.0, 1.0, 1.0])


def test_short_input_yields_one_nan_per_bar() -> None:
    highs = _series([2, 4, 6])

    result = awesome_oscillator(highs, highs - 1)

    assert len(result) == 3
    assert result.isna().all()


def test_chaikin_oscillator_is_flat_for_flat_accumulation() -> None:
    highs = _series([10, 10, 10, 10])
    lows = _series([0, 0, 0, 0])
    closes = _series([5, 5, 5, 5])
    volumes = _series([100, 200, 300, 400])

    result = chaikin_oscillator(highs, lows, closes, volumes, fast_period=1, slow_period=2)

    assert result.ad.tolist() == pytest.approx([0.0] * 4)
    assert result.cmo.dropna().abs().max() == pytest.approx(0.0, abs=1e-9)


def test_ichimoku_cloud_projects_spans_by_base_period() -> None:
    values = _series([float(value) for value in range(1, 11)])

    cloud = ichimoku_cloud(values + 1, values - 1, values, 2, 3, 4)

    assert len(cloud.leading_span_a) == 10
    assert cloud.leading_span_a.iloc[:3].isna().all()
    assert cloud.leading_span_b.iloc[:3].isna().all()
    assert cloud.lagging_span.iloc[-3:].isna().all()
    assert cloud.lagging_span.iloc[0] == pytest.approx(4.0)
    assert cloud.conversion_line.iloc[-1] == pytest.approx(9.5)


def test_percentage_price_oscillator_is_zero_for_constant_prices() -> None:
    result = percentage_price_oscillator(_series([50.0] * 30))

    assert result.oscillator.dropna().abs().max() == pytest.approx(0.0, abs=1e-9)
    assert result.signal.dropna().abs().max() == pytest.approx(0.0, abs=1e-9)
    assert result.histogram.dropna().abs().max() == pytest.approx(0.0, abs=1e-9)


def test_percentage_volume_oscillator_rises_with_volume() -> None:
    volumes = _series([100.0] * 20 + [1_000.0] * 20)

    result = percentage_volume_oscillator(volumes, fast_period=3, slow_period=10, signal_period=3)

    assert len(result.oscillator) == 40
    assert result.oscillator.iloc[-1] > 0


def test_price_rate_of_change_in_percent() -> None:
    result = price_rate_of_change(_series([100, 110, 121]), period=1)

    assert math.isnan(result.iloc[0])
    assert result.iloc[1:].tolist() == pytest.approx([10.0, 10.0])


def test_relative_strength_index_saturates_without_losses() -> None:
    result = relative_strength_index(_series([1, 2, 3, 4, 5, 6]), period=2)

    assert math.isnan(result.iloc[0])
    assert result.iloc[-1] == pytest.approx(100.0)


def test_relative_strength_index_balanced_moves() -> None:
    result = relative_strength_index(_series([10, 11, 10]), period=1)

    assert result.iloc[1] == pytest.approx(100.0)
    assert result.iloc[2] == pytest.approx(0.0)


def test_stochastic_oscillator_positions_close_in_range() -> None:
    highs = _series([10, 10, 10, 10])
    lows = _series([0, 0, 0, 0])
    closes = _series([5, 10, 0, 10])

    result = stochastic_oscillator(highs, lows, closes, period=3, signal_period=1)

    assert result.k.iloc[2:].tolist() == pytest.approx([0.0, 100.0])
    assert result.d.iloc[2:].tolist() == pytest.approx([0.0, 100.0])


def test_williams_r_is_negative_percent_from_high() -> None:
    highs = _series([10, 10, 10, 10])
    lows = _series([0, 0, 0, 0])
    closes = _series([5, 5, 10, 0])

    result = williams_r(highs, lows, closes, period=3)

    assert result.iloc[:2].isna().all()
    assert result.iloc[2:].tolist() == pytest.approx([0.0, -100.0])


def test_price_momentum_is_price_difference() -> None:
    result = price_momentum(_series([1, 3, 6]), period=1)

    assert math.isnan(result.iloc[0])
    assert result.iloc[1:].tolist() == pytest.approx([2.0, 3.0])


def test_non_positive_period_is_rejected() -> None:
    with pytest.raises(ValueError, match="period must be positive"):
        price_momentum(_series([1, 2]), period=0)
