"""Volume strategy tools."""

from typing import Annotated

from pydantic import Field

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.strategies import volume as strategies
from crypto_indicators.tools.common import (
    DEFAULT_LIMIT,
    DEFAULT_TIMEFRAME,
    SIGNAL_OUTPUTS,
    Limit,
    Period,
    Symbol,
    TimeframeParam,
    ToolServer,
    run_strategy_tool,
)


def register(server: ToolServer, fetcher: OhlcvFetcher) -> None:
    """Register the volume strategy tools on ``server``."""

    @server.tool(
        name="calculate_chaikin_money_flow_strategy",
        description=(
            "Calculate the Chaikin Money Flow Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_chaikin_money_flow_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for CMF")] = 20,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_chaikin_money_flow_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.chaikin_money_flow_strategy(series, period),
        )

    @server.tool(
        name="calculate_ease_of_movement_strategy",
        description=(
            "Calculate the Ease of Movement Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_ease_of_movement_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for EMV")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_ease_of_movement_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.ease_of_movement_strategy(series, period),
        )

    @server.tool(
        name="calculate_force_index_strategy",
        description=(
            "Calculate the Force Index Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_force_index_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for FI")] = 13,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_force_index_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.force_index_strategy(series, period),
        )

    @server.tool(
        name="calculate_money_flow_index_strategy",
        description=(
            "Calculate the Money Flow Index Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_money_flow_index_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for MFI")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_money_flow_index_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.money_flow_index_strategy(series, period),
        )

    @server.tool(
        name="calculate_negative_volume_index_strategy",
        description=(
            "Calculate the Negative Volume Index Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_negative_volume_index_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for NVI")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_negative_volume_index_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.negative_volume_index_strategy(series, period),
        )

    @server.tool(
        name="calculate_volume_weighted_average_price_strategy",
        description=(
            "Calculate the VWAP Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_volume_weighted_average_price_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for VWAP")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_volume_weighted_average_price_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.volume_weighted_average_price_strategy(series, period),
        )
