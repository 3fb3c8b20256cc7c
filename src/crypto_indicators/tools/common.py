"""Parameter types, execution and serialization shared by every tool."""

import asyncio
import json
import logging
import math
from collections.abc import Callable
from dataclasses import fields, is_dataclass
from typing import Annotated, Any, Protocol

import pandas as pd
from pydantic import Field

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.domain.errors import IndicatorServerError
from crypto_indicators.domain.models import PriceSeries, Timeframe

logger = logging.getLogger(__name__)

SYMBOL_PATTERN = r"^[A-Z0-9]{1,10}/[A-Z0-9]{1,10}$"
MAX_LIMIT = 10_000
DEFAULT_LIMIT = 100
MAX_PERIOD = 500
DEFAULT_TIMEFRAME = Timeframe.ONE_HOUR
SIGNAL_OUTPUTS = "Outputs: -1 (SELL), 0 (HOLD), 1 (BUY)"

Symbol = Annotated[
    str,
    Field(pattern=SYMBOL_PATTERN, description="Trading pair, e.g., 'BTC/USDT'"),
]
TimeframeParam = Annotated[Timeframe, Field(description="Timeframe")]
Limit = Annotated[
    int,
    Field(ge=1, le=MAX_LIMIT, description="Number of OHLCV data points to fetch"),
]
Period = Annotated[int, Field(ge=1, le=MAX_PERIOD)]


class ToolServer(Protocol):
    """The registration surface of FastMCP used by the tool modules."""

    def tool(
        self,
        name: str | None = None,
        description: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Return a decorator registering a tool handler."""


def to_jsonable(value: Any) -> Any:
    """Convert indicator output into plain JSON values; NaN and inf become None."""
    if isinstance(value, pd.Series):
        return [to_jsonable(item) for item in value.tolist()]
    if is_dataclass(value) and not isinstance(value, type):
        return {field.name: to_jsonable(getattr(value, field.name)) for field in fields(value)}
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    return value


def serialize_result(result: Any) -> str:
    return json.dumps(to_jsonable(result), allow_nan=False)


async def _run(
    fetcher: OhlcvFetcher,
    tool_name: str,
    symbol: str,
    timeframe: Timeframe,
    limit: int,
    compute: Callable[[PriceSeries], Any],
) -> str:
    try:
        series = await asyncio.to_thread(fetcher.fetch, symbol, timeframe, limit)
        result = compute(series)
        text = serialize_result(result)
    except (IndicatorServerError, ValueError) as exc:
        logger.warning("tool failed | %s | %s | %s", tool_name, symbol, exc)
        return f"Error: {exc}"
    except Exception as exc:
        logger.exception("tool crashed | %s | %s", tool_name, symbol)
        return f"Error: {exc}"
    logger.info("tool | %s | %s | %s | bars %d", tool_name, symbol, timeframe, len(series))
    return text


async def run_indicator_tool(
    fetcher: OhlcvFetcher,
    tool_name: str,
    symbol: str,
    timeframe: Timeframe,
    limit: int,
    compute: Callable[[pd.DataFrame], Any],
) -> str:
    """Fetch bars, run an indicator over the bar frame and return JSON text."""
    return await _run(
        fetcher,
        tool_name,
        symbol,
        timeframe,
        limit,
        lambda series: compute(series.to_frame()),
    )


async def run_strategy_tool(
    fetcher: OhlcvFetcher,
    tool_name: str,
    symbol: str,
    timeframe: Timeframe,
    limit: int,
    compute: Callable[[PriceSeries], pd.Series],
) -> str:
    """Fetch bars, run a strategy and return its actions as JSON text."""
    return await _run(fetcher, tool_name, symbol, timeframe, limit, compute)
