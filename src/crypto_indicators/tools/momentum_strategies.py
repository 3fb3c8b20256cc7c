"""Momentum strategy tools."""

from typing import Annotated

from pydantic import Field

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.strategies import momentum as strategies
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
    """Register the momentum strategy tools on ``server``."""

    @server.tool(
        name="calculate_momentum_strategy",
        description=(
            "Calculate the Momentum Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_momentum_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for Momentum")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_momentum_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.momentum_strategy(series, period),
        )

    @server.tool(
        name="calculate_awesome_oscillator_strategy",
        description=(
            "Calculate the Awesome Oscillator Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_awesome_oscillator_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        fast_period: Annotated[Period, Field(description="Fast period for AO")] = 5,
        slow_period: Annotated[Period, Field(description="Slow period for AO")] = 34,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_awesome_oscillator_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.awesome_oscillator_strategy(
                series, fast_period, slow_period
            ),
        )

    @server.tool(
        name="calculate_ichimoku_cloud_strategy",
        description=(
            "Calculate the Ichimoku Cloud Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_ichimoku_cloud_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        conversion_period: Annotated[Period, Field(description="Conversion line period")] = 9,
        base_period: Annotated[Period, Field(description="Base line period")] = 26,
        span_period: Annotated[Period, Field(description="Leading span period")] = 52,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_ichimoku_cloud_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.ichimoku_cloud_strategy(
                series, conversion_period, base_period, span_period
            ),
        )

    @server.tool(
        name="calculate_rsi2_strategy",
        description=(
            "Calculate the RSI2 Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_rsi2_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for RSI2")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_rsi2_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.rsi2_strategy(series, period),
        )

    @server.tool(
        name="calculate_stochastic_oscillator_strategy",
        description=(
            "Calculate the Stochastic Oscillator Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_stochastic_oscillator_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for STOCH")] = 14,
        signal_period: Annotated[Period, Field(description="Signal period for STOCH")] = 3,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_stochastic_oscillator_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.stochastic_oscillator_strategy(
                series, period, signal_period
            ),
        )

    @server.tool(
        name="calculate_williams_r_strategy",
        description=(
            "Calculate the Williams R Strategy for a given trading pair using exchange "
            f"OHLCV data. {SIGNAL_OUTPUTS}"
        ),
    )
    async def calculate_williams_r_strategy(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for WILLR")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_strategy_tool(
            fetcher,
            "calculate_williams_r_strategy",
            symbol,
            timeframe,
            limit,
            lambda series: strategies.williams_r_strategy(series, period),
        )
