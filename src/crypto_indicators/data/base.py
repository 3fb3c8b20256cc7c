"""Exchange client contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class OhlcvExchange(Protocol):
    """Subset of the ccxt exchange interface used for bar retrieval."""

    id: str
    has: Mapping[str, Any]

    def fetch_ohlcv(
        self,
        symbol: str,
        timeframe: str = "1m",
        since: int | None = None,
        limit: int | None = None,
    ) -> list[list[Any]]:
        """Return raw OHLCV rows, oldest first."""
