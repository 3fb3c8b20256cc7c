"""Tests for the exchange OHLCV fetcher."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.domain.errors import (
    CapabilityError,
    DataProviderError,
    MalformedResponseError,
)
from crypto_indicators.domain.models import PriceSeries, Timeframe

ROWS = [
    [1_700_000_000_000, 100.0, 110.0, 95.0, 105.0, 12.5],
    [1_700_003_600_000, 105.0, 112.0, 101.0, 111.0, 8.0],
    [1_700_007_200_000, 111.0, 115.0, 108.0, 109.5, 15.25, "extra"],
]


class FakeExchange:
    id = "fakex"

    def __init__(self, rows: Any = None, has_ohlcv: bool = True, error: Exception | None = None):
        self.has = {"fetchOHLCV": has_ohlcv}
        self.rows = ROWS if rows is None else rows
        self.error = error
        self.calls: list[tuple[str, str, int | None, int | None]] = []

    def fetch_ohlcv(
        self,
        symbol: str,
        timeframe: str = "1m",
        since: int | None = None,
        limit: int | None = None,
    ) -> Any:
        self.calls.append((symbol, timeframe, since, limit))
        if self.error is not None:
            raise self.error
        return self.rows


def test_fetch_transposes_rows_into_columns() -> None:
    exchange = FakeExchange()
    series = OhlcvFetcher(exchange).fetch("BTC/USDT", Timeframe.ONE_HOUR, 3)

    assert isinstance(series, PriceSeries)
    assert len(series) == 3
    assert series.dates[0] == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
    assert series.openings == (100.0, 105.0, 111.0)
    assert series.highs == (110.0, 112.0, 115.0)
    assert series.lows == (95.0, 101.0, 108.0)
    assert series.closings == (105.0, 111.0, 109.5)
    assert series.volumes == (12.5, 8.0, 15.25)


def test_fetch_issues_one_request_anchored_at_latest_bars() -> None:
    exchange = FakeExchange()
    OhlcvFetcher(exchange).fetch("ETH/USDT", Timeframe.ONE_DAY, 50)

    assert exchange.calls == [("ETH/USDT", "1d", None, 50)]


def test_fetch_rejects_empty_response() -> None:
    fetcher = OhlcvFetcher(FakeExchange(rows=[]))

    with pytest.raises(DataProviderError) as exc_info:
        fetcher.fetch("BTC/USDT", "1h", 10)

    assert str(exc_info.value) == (
        "Failed to fetch OHLCV data: No OHLCV data returned from exchange"
    )
    assert isinstance(exc_info.value.__cause__, MalformedResponseError)


def test_fetch_rejects_non_list_response() -> None:
    fetcher = OhlcvFetcher(FakeExchange(rows={"data": []}))

    with pytest.raises(DataProviderError, match="No OHLCV data returned"):
        fetcher.fetch("BTC/USDT", "1h", 10)


def test_fetch_names_index_of_short_row() -> None:
    rows = [list(ROWS[0]), list(ROWS[1]), list(ROWS[0]), [1_700_010_800_000, 1.0, 2.0, 0.5]]
    fetcher = OhlcvFetcher(FakeExchange(rows=rows))

    with pytest.raises(DataProviderError) as exc_info:
        fetcher.fetch("BTC/USDT", "1h", 4)

    assert "Malformed OHLCV row at index 3" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, MalformedResponseError)


def test_fetch_rejects_non_sequence_row() -> None:
    fetcher = OhlcvFetcher(FakeExchange(rows=[ROWS[0], "not-a-row"]))

    with pytest.raises(DataProviderError, match="Malformed OHLCV row at index 1"):
        fetcher.fetch("BTC/USDT", "1h", 2)


def test_fetch_checks_capability_before_requesting() -> None:
    exchange = FakeExchange(has_ohlcv=False)

    with pytest.raises(DataProviderError) as exc_info:
        OhlcvFetcher(exchange).fetch("BTC/USDT", "1h", 10)

    assert str(exc_info.value) == "Failed to fetch OHLCV data: fakex does not support fetchOHLCV"
    assert isinstance(exc_info.value.__cause__, CapabilityError)
    assert exchange.calls == []


def test_fetch_wraps_provider_exceptions() -> None:
    exchange = FakeExchange(error=ConnectionError("network down"))

    with pytest.raises(DataProviderError) as exc_info:
        OhlcvFetcher(exchange).fetch("BTC/USDT", "1h", 10)

    message = str(exc_info.value)
    assert message.startswith("Failed to fetch OHLCV data: ")
    assert "network down" in message
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert len(exchange.calls) == 1


def test_fetch_wraps_unconvertible_values() -> None:
    rows = [[1_700_000_000_000, 100.0, 110.0, 95.0, 105.0, None]]

    with pytest.raises(DataProviderError):
        OhlcvFetcher(FakeExchange(rows=rows)).fetch("BTC/USDT", "1h", 1)


def test_price_series_rejects_mismatched_columns() -> None:
    stamp = datetime(2025, 1, 1, tzinfo=UTC)

    with pytest.raises(ValueError, match="equal length"):
        PriceSeries(
            dates=(stamp, stamp),
            openings=(1.0,),
            highs=(1.0, 2.0),
            lows=(1.0, 2.0),
            closings=(1.0, 2.0),
            volumes=(1.0, 2.0),
        )


def test_price_series_frame_has_ohlcv_columns() -> None:
    series = OhlcvFetcher(FakeExchange()).fetch("BTC/USDT", "1h", 3)
    frame = series.to_frame()

    assert list(frame.columns) == ["open", "high", "low", "close", "volume"]
    assert len(frame) == 3
    assert float(frame["close"].iloc[-1]) == 109.5
