"""Market data retrieval."""

from .base import OhlcvExchange
from .exchanges import build_exchange
from .ohlcv_fetcher import OhlcvFetcher

__all__ = ["OhlcvExchange", "OhlcvFetcher", "build_exchange"]
