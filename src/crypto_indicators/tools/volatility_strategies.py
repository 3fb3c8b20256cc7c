"""Volatility strategy tools."""

from typing import Annotated

from pydantic import Field

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.strategies import volatility as strategies
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
    """Register the volatility strategy tools on ``server``."""

    @server.tool(
        name="calculate_acceleration_bands_strategy",
        description=(
            "Calculate the Acceleration Bands Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_acceleration_bands_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for AB")] = 20,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_acceleration_bands_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.acceleration_bands_strategy(series, period),
        )

    @server.tool(
        name="calculate_bollinger_bands_strategy",
        description=(
            "Calculate the Bollinger Bands Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_bollinger_bands_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for BB")] = 20,
        std_dev: Annotated[
            float,
            Field(ge=0.1, le=10, description="Standard deviation multiplier"),
        ] = 2.0,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_bollinger_bands_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.bollinger_bands_strategy(series, period, std_dev),
        )

    @server.tool(
        name="calculate_projection_oscillator_strategy",
        description=(
            "Calculate the Projection Oscillator Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_projection_oscillator_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for PO")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_projection_oscillator_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.projection_oscillator_strategy(series, period),
        )
