"""Volume indicator tools."""

from typing import Annotated

from pydantic import Field

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.indicators import volume as indicators
from crypto_indicators.tools.common import (
    DEFAULT_LIMIT,
    DEFAULT_TIMEFRAME,
    Limit,
    Period,
    Symbol,
    TimeframeParam,
    ToolServer,
    run_indicator_tool,
)


def register(server: ToolServer, fetcher: OhlcvFetcher) -> None:
    """Register the volume indicator tools on ``server``."""

    @server.tool(
        name="calculate_accumulation_distribution",
        description=(
            "Calculate the Accumulation/Distribution (AD) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_accumulation_distribution(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_accumulation_distribution",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.accumulation_distribution(
                bars["high"], bars["low"], bars["close"], bars["volume"]
            ),
        )

    @server.tool(
        name="calculate_chaikin_money_flow",
        description=(
            "Calculate the Chaikin Money Flow (CMF) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_chaikin_money_flow(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for CMF")] = 20,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_chaikin_money_flow",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.chaikin_money_flow(
                bars["high"], bars["low"], bars["close"], bars["volume"], period
            ),
        )

    @server.tool(
        name="calculate_ease_of_movement",
        description=(
            "Calculate the Ease of Movement (EMV) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_ease_of_movement(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for EMV")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_ease_of_movement",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.ease_of_movement(
                bars["high"], bars["low"], bars["close"], bars["volume"], period
            ),
        )

    @server.tool(
        name="calculate_force_index",
        description=(
            "Calculate the Force Index (FI) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_force_index(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for FI")] = 13,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_force_index",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.force_index(bars["close"], bars["volume"], period),
        )

    @server.tool(
        name="calculate_money_flow_index",
        description=(
            "Calculate the Money Flow Index (MFI) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_money_flow_index(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for MFI")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_money_flow_index",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.money_flow_index(
                bars["high"], bars["low"], bars["close"], bars["volume"], period
            ),
        )

    @server.tool(
        name="calculate_negative_volume_index",
        description=(
            "Calculate the Negative Volume Index (NVI) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_negative_volume_index(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_negative_volume_index",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.negative_volume_index(bars["close"], bars["volume"]),
        )

    @server.tool(
        name="calculate_on_balance_volume",
        description=(
            "Calculate the On-Balance Volume (OBV) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_on_balance_volume(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_on_balance_volume",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.on_balance_volume(bars["close"], bars["volume"]),
        )

    @server.tool(
        name="calculate_volume_price_trend",
        description=(
            "Calculate the Volume Price Trend (VPT) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_volume_price_trend(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_volume_price_trend",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.volume_price_trend(bars["close"], bars["volume"]),
        )

    @server.tool(
        name="calculate_volume_weighted_average_price",
        description=(
            "Calculate the Volume Weighted Average Price (VWAP) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_volume_weighted_average_price(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for VWAP")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_volume_weighted_average_price",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.volume_weighted_average_price(
                bars["high"], bars["low"], bars["close"], bars["volume"], period
            ),
        )
