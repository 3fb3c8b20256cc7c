"""Core market data domain models."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import IntEnum, StrEnum
from typing import Self

import pandas as pd

from crypto_indicators.domain.errors import ConfigError


class Timeframe(StrEnum):
    """Supported bar durations."""

    ONE_MINUTE = "1m"
    THREE_MINUTES = "3m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1M"


class ExchangeId(StrEnum):
    """Exchanges the server may be configured against."""

    BINANCE = "binance"
    KRAKEN = "kraken"
    COINBASE = "coinbase"
    BYBIT = "bybit"
    OKX = "okx"
    KUCOIN = "kucoin"
    GATE = "gate"
    HUOBI = "huobi"
    BITFINEX = "bitfinex"
    MEXC = "mexc"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Resolve an exchange id, rejecting anything outside the allow-list."""
        candidate = value.strip().lower()
        for member in cls:
            if member.value == candidate:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ConfigError(f'Unsupported exchange: "{value}". Allowed: {allowed}')


class Action(IntEnum):
    """Per-bar strategy signal."""

    SELL = -1
    HOLD = 0
    BUY = 1


@dataclass(frozen=True)
class PriceSeries:
    """Column-oriented OHLCV bars ordered oldest to newest."""

    dates: tuple[datetime, ...]
    openings: tuple[float, ...]
    highs: tuple[float, ...]
    lows: tuple[float, ...]
    closings: tuple[float, ...]
    volumes: tuple[float, ...]

    def __post_init__(self) -> None:
        lengths = {field.name: len(getattr(self, field.name)) for field in fields(self)}
        if not lengths["dates"]:
            raise ValueError("price series must contain at least one bar")
        if len(set(lengths.values())) != 1:
            raise ValueError(f"price series columns must have equal length: {lengths}")

    def __len__(self) -> int:
        return len(self.dates)

    def to_frame(self) -> pd.DataFrame:
        """Return bars as a DataFrame with a datetime index."""
        return pd.DataFrame(
            {
                "open": self.openings,
                "high": self.highs,
                "low": self.lows,
                "close": self.closings,
                "volume": self.volumes,
            },
            index=pd.DatetimeIndex(self.dates, name="date"),
            dtype=float,
        )
