"""Historical bar retrieval from a ccxt exchange."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from crypto_indicators.data.base import OhlcvExchange
from crypto_indicators.domain.errors import (
    CapabilityError,
    DataProviderError,
    MalformedResponseError,
)
from crypto_indicators.domain.models import PriceSeries, Timeframe

logger = logging.getLogger(__name__)

OHLCV_FIELD_COUNT = 6


class OhlcvFetcher:
    """Fetch OHLCV bars and return them as a validated PriceSeries.

    The exchange client is shared by every call; the fetcher itself holds no
    per-call state, issues exactly one request per ``fetch`` and never retries.
    """

    def __init__(self, exchange: OhlcvExchange) -> None:
        self.exchange = exchange

    @property
    def exchange_name(self) -> str:
        return str(getattr(self.exchange, "id", type(self.exchange).__name__))

    def fetch(self, symbol: str, timeframe: Timeframe | str, limit: int) -> PriceSeries:
        try:
            if not self.exchange.has.get("fetchOHLCV"):
                raise CapabilityError(f"{self.exchange_name} does not support fetchOHLCV")
            logger.debug(
                "fetch | %s | %s | %s | limit %d",
                self.exchange_name,
                symbol,
                timeframe,
                limit,
            )
            rows = self.exchange.fetch_ohlcv(symbol, str(timeframe), None, limit)
            self._validate_rows(rows)
            series = self._rows_to_series(rows)
        except Exception as exc:
            logger.warning("fetch failed | %s | %s | %s", self.exchange_name, symbol, exc)
            raise DataProviderError(str(exc)) from exc
        logger.debug("fetched | %s | %s | bars %d", self.exchange_name, symbol, len(series))
        return series

    @staticmethod
    def _validate_rows(rows: Any) -> None:
        if not isinstance(rows, (list, tuple)) or not rows:
            raise MalformedResponseError("No OHLCV data returned from exchange")
        for index, row in enumerate(rows):
            if not isinstance(row, (list, tuple)) or len(row) < OHLCV_FIELD_COUNT:
                raise MalformedResponseError(
                    f"Malformed OHLCV row at index {index}: expected {OHLCV_FIELD_COUNT} values"
                )

    @staticmethod
    def _rows_to_series(rows: Sequence[Sequence[Any]]) -> PriceSeries:
        return PriceSeries(
            dates=tuple(datetime.fromtimestamp(row[0] / 1000, tz=UTC) for row in rows),
            openings=tuple(float(row[1]) for row in rows),
            highs=tuple(float(row[2]) for row in rows),
            lows=tuple(float(row[3]) for row in rows),
            closings=tuple(float(row[4]) for row in rows),
            volumes=tuple(float(row[5]) for row in rows),
        )
