from __future__ import annotations

import math

import pandas as pd
import pytest

from crypto_indicators.indicators.volatility import (
    acceleration_bands,
    bollinger_bands,
    projection_oscillator,
)


def _series(values: list[float]) -> pd.Series:
    return pd.Series(values, dtype=float)


def test_bollinger_bands_use_population_deviation() -> None:
    bands = bollinger_bands(_series([1, 3, 5]), period=2, std_dev=1.0)

    assert math.isnan(bands.middle.iloc[0])
    assert bands.middle.iloc[1:].tolist() == pytest.approx([2.0, 4.0])
    assert bands.upper.iloc[1:].tolist() == pytest.approx([3.0, 5.0])
    assert bands.lower.iloc[1:].tolist() == pytest.approx([1.0, 3.0])


def test_bollinger_bands_reject_non_positive_width() -> None:
    with pytest.raises(ValueError, match="std_dev"):
        bollinger_bands(_series([1, 2]), std_dev=0)


def test_acceleration_bands_collapse_without_range() -> None:
    prices = _series([10, 12, 14])

    bands = acceleration_bands(prices, prices, prices, period=2)

    assert bands.upper.iloc[1:].tolist() == pytest.approx([11.0, 13.0])
    assert bands.middle.iloc[1:].tolist() == pytest.approx([11.0, 13.0])
    assert bands.lower.iloc[1:].tolist() == pytest.approx([11.0, 13.0])


def test_acceleration_bands_widen_with_range() -> None:
    bands = acceleration_bands(_series([11]), _series([9]), _series([10]), period=1)

    assert bands.upper.iloc[0] == pytest.approx(11 * 1.4)
    assert bands.lower.iloc[0] == pytest.approx(9 * 0.6)


def test_projection_oscillator_centers_close_in_linear_trend() -> None:
    trend = _series([float(value) for value in range(10)])

    result = projection_oscillator(trend + 1, trend - 1, trend, period=5, smooth=3)

    assert math.isnan(result.po.iloc[0])
    assert result.po.iloc[1:].tolist() == pytest.approx([50.0] * 9)
    assert result.spo.iloc[-1] == pytest.approx(50.0)


def test_bollinger_bands_collapse_for_single_bar_window() -> None:
    bands = bollinger_bands(_series([4, 8]), period=1, std_dev=2.0)

    assert bands.upper.tolist() == pytest.approx([4.0, 8.0])
    assert bands.lower.tolist() == pytest.approx([4.0, 8.0])
