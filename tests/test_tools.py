from __future__ import annotations

import asyncio
import json
import math
from datetime import UTC, datetime, timedelta
from types import ModuleType
from typing import Any

import pandas as pd

from crypto_indicators.domain.errors import DataProviderError
from crypto_indicators.domain.models import PriceSeries, Timeframe
from crypto_indicators.indicators.volatility import BandsResult
from crypto_indicators.server import register_tools
from crypto_indicators.tools.common import serialize_result, to_jsonable

EXPECTED_TOOLS = {
    "calculate_awesome_oscillator",
    "calculate_chaikin_oscillator",
    "calculate_ichimoku_cloud",
    "calculate_percentage_price_oscillator",
    "calculate_percentage_volume_oscillator",
    "calculate_price_rate_of_change",
    "calculate_relative_strength_index",
    "calculate_stochastic_oscillator",
    "calculate_williams_r",
    "calculate_accumulation_distribution",
    "calculate_chaikin_money_flow",
    "calculate_ease_of_movement",
    "calculate_force_index",
    "calculate_money_flow_index",
    "calculate_negative_volume_index",
    "calculate_on_balance_volume",
    "calculate_volume_price_trend",
    "calculate_volume_weighted_average_price",
    "calculate_momentum_strategy",
    "calculate_awesome_oscillator_strategy",
    "calculate_ichimoku_cloud_strategy",
    "calculate_rsi2_strategy",
    "calculate_stochastic_oscillator_strategy",
    "calculate_williams_r_strategy",
    "calculate_acceleration_bands_strategy",
    "calculate_bollinger_bands_strategy",
    "calculate_projection_oscillator_strategy",
    "calculate_chaikin_money_flow_strategy",
    "calculate_ease_of_movement_strategy",
    "calculate_force_index_strategy",
    "calculate_money_flow_index_strategy",
    "calculate_negative_volume_index_strategy",
    "calculate_volume_weighted_average_price_strategy",
}


class RecordingServer:
    def __init__(self) -> None:
        self.tools: dict[str, Any] = {}
        self.descriptions: dict[str, str | None] = {}

    def tool(self, name: str | None = None, description: str | None = None):
        def decorator(fn):
            self.tools[name or fn.__name__] = fn
            self.descriptions[name or fn.__name__] = description
            return fn

        return decorator


class FakeFetcher:
    exchange_name = "fakex"

    def __init__(self, series: PriceSeries | None = None, error: Exception | None = None):
        self.series = series
        self.error = error
        self.calls: list[tuple[str, Timeframe, int]] = []

    def fetch(self, symbol: str, timeframe: Timeframe, limit: int) -> PriceSeries:
        self.calls.append((symbol, timeframe, limit))
        if self.error is not None:
            raise self.error
        assert self.series is not None
        return self.series


def _price_series(closings: list[float], volumes: list[float] | None = None) -> PriceSeries:
    start = datetime(2025, 1, 1, tzinfo=UTC)
    count = len(closings)
    return PriceSeries(
        dates=tuple(start + timedelta(hours=index) for index in range(count)),
        openings=tuple(float(value) for value in closings),
        highs=tuple(float(value) + 1.0 for value in closings),
        lows=tuple(float(value) - 1.0 for value in closings),
        closings=tuple(float(value) for value in closings),
        volumes=tuple(float(value) for value in (volumes or range(1, count + 1))),
    )


def _registered(fetcher: FakeFetcher) -> RecordingServer:
    server = RecordingServer()
    register_tools(server, fetcher)
    return server


def test_registers_every_indicator_and_strategy_tool() -> None:
    server = _registered(FakeFetcher())

    assert set(server.tools) == EXPECTED_TOOLS
    assert len(server.tools) == 33
    assert "-1 (SELL)" in server.descriptions["calculate_rsi2_strategy"]


def test_every_tool_returns_json_text() -> None:
    series = _price_series([100.0 + (index % 7) - (index % 3) for index in range(60)])
    server = _registered(FakeFetcher(series))

    for name, handler in server.tools.items():
        text = asyncio.run(handler(symbol="BTC/USDT"))
        assert not text.startswith("Error:"), name
        payload = json.loads(text)
        assert isinstance(payload, (list, dict)), name


def test_strategy_tool_returns_one_action_per_bar() -> None:
    series = _price_series([float(value) for value in range(1, 31)])
    server = _registered(FakeFetcher(series))

    text = asyncio.run(server.tools["calculate_momentum_strategy"](symbol="BTC/USDT", period=1))

    assert json.loads(text) == [0] + [1] * 29


def test_indicator_tool_fetches_with_requested_arguments() -> None:
    fetcher = FakeFetcher(_price_series([10.0, 11.0, 10.0, 12.0], volumes=[1.0, 2.0, 3.0, 4.0]))
    server = _registered(fetcher)

    text = asyncio.run(
        server.tools["calculate_on_balance_volume"](
            symbol="ETH/USDT",
            timeframe=Timeframe.FOUR_HOURS,
            limit=4,
        )
    )

    payload = json.loads(text)
    assert len(payload) == 4
    assert [later - earlier for earlier, later in zip(payload, payload[1:])] == [2.0, -3.0, 4.0]
    assert fetcher.calls == [("ETH/USDT", Timeframe.FOUR_HOURS, 4)]


def test_multi_output_indicator_returns_named_fields() -> None:
    server = _registered(FakeFetcher(_price_series([float(value) for value in range(1, 11)])))

    text = asyncio.run(server.tools["calculate_stochastic_oscillator"](symbol="BTC/USDT"))

    assert set(json.loads(text)) == {"k", "d"}


def test_fetch_failure_becomes_error_text() -> None:
    fetcher = FakeFetcher(error=DataProviderError("exchange unavailable"))
    server = _registered(fetcher)

    text = asyncio.run(server.tools["calculate_relative_strength_index"](symbol="BTC/USDT"))

    assert text == "Error: Failed to fetch OHLCV data: exchange unavailable"


def test_invalid_computation_becomes_error_text() -> None:
    server = _registered(FakeFetcher(_price_series([1.0, 2.0, 3.0])))

    text = asyncio.run(
        server.tools["calculate_bollinger_bands_strategy"](symbol="BTC/USDT", std_dev=0.0)
    )

    assert text == "Error: std_dev must be positive"


def test_serialize_result_maps_non_finite_values_to_null() -> None:
    values = pd.Series([1.5, math.nan, math.inf, -2.0])

    assert json.loads(serialize_result(values)) == [1.5, None, None, -2.0]


def test_to_jsonable_expands_result_dataclasses() -> None:
    bands = BandsResult(
        upper=pd.Series([2.0]),
        middle=pd.Series([1.0]),
        lower=pd.Series([math.nan]),
    )

    assert to_jsonable(bands) == {"upper": [2.0], "middle": [1.0], "lower": [None]}


def test_unexpected_failure_becomes_error_text() -> None:
    server = _registered(FakeFetcher(error=RuntimeError("socket closed")))

    text = asyncio.run(server.tools["calculate_awesome_oscillator"](symbol="BTC/USDT"))

    assert text == "Error: socket closed"


def test_indicator_package_keeps_submodules_bound() -> None:
    import crypto_indicators.indicators as package

    assert isinstance(package.momentum, ModuleType)
    assert isinstance(package.volume, ModuleType)
    assert callable(package.momentum.awesome_oscillator)
