"""Momentum indicator tools."""

from typing import Annotated

from pydantic import Field

from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.indicators import momentum as indicators
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
    """Register the momentum indicator tools on ``server``."""

    @server.tool(
        name="calculate_awesome_oscillator",
        description=(
            "Calculate the Awesome Oscillator (AO) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_awesome_oscillator(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        fast_period: Annotated[Period, Field(description="Fast period for AO")] = 5,
        slow_period: Annotated[Period, Field(description="Slow period for AO")] = 34,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_awesome_oscillator",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.awesome_oscillator(
                bars["high"], bars["low"], fast_period, slow_period
            ),
        )

    @server.tool(
        name="calculate_chaikin_oscillator",
        description=(
            "Calculate the Chaikin Oscillator (CMO) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_chaikin_oscillator(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        fast_period: Annotated[Period, Field(description="Fast period for CMO")] = 3,
        slow_period: Annotated[Period, Field(description="Slow period for CMO")] = 10,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_chaikin_oscillator",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.chaikin_oscillator(
                bars["high"], bars["low"], bars["close"], bars["volume"], fast_period, slow_period
            ),
        )

    @server.tool(
        name="calculate_ichimoku_cloud",
        description=(
            "Calculate the Ichimoku Cloud for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_ichimoku_cloud(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        conversion_period: Annotated[Period, Field(description="Conversion line period")] = 9,
        base_period: Annotated[Period, Field(description="Base line period")] = 26,
        span_period: Annotated[Period, Field(description="Leading span period")] = 52,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_ichimoku_cloud",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.ichimoku_cloud(
                bars["high"],
                bars["low"],
                bars["close"],
                conversion_period,
                base_period,
                span_period,
            ),
        )

    @server.tool(
        name="calculate_percentage_price_oscillator",
        description=(
            "Calculate the Percentage Price Oscillator (PPO) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_percentage_price_oscillator(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        fast_period: Annotated[Period, Field(description="Fast period for PPO")] = 12,
        slow_period: Annotated[Period, Field(description="Slow period for PPO")] = 26,
        signal_period: Annotated[Period, Field(description="Signal period for PPO")] = 9,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_percentage_price_oscillator",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.percentage_price_oscillator(
                bars["close"], fast_period, slow_period, signal_period
            ),
        )

    @server.tool(
        name="calculate_percentage_volume_oscillator",
        description=(
            "Calculate the Percentage Volume Oscillator (PVO) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_percentage_volume_oscillator(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        fast_period: Annotated[Period, Field(description="Fast period for PVO")] = 12,
        slow_period: Annotated[Period, Field(description="Slow period for PVO")] = 26,
        signal_period: Annotated[Period, Field(description="Signal period for PVO")] = 9,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_percentage_volume_oscillator",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.percentage_volume_oscillator(
                bars["volume"], fast_period, slow_period, signal_period
            ),
        )

    @server.tool(
        name="calculate_price_rate_of_change",
        description=(
            "Calculate the Price Rate of Change (ROC) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_price_rate_of_change(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for ROC")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_price_rate_of_change",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.price_rate_of_change(bars["close"], period),
        )

    @server.tool(
        name="calculate_relative_strength_index",
        description=(
            "Calculate the Relative Strength Index (RSI) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_relative_strength_index(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for RSI")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_relative_strength_index",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.relative_strength_index(bars["close"], period),
        )

    @server.tool(
        name="calculate_stochastic_oscillator",
        description=(
            "Calculate the Stochastic Oscillator (STOCH) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_stochastic_oscillator(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for STOCH")] = 14,
        signal_period: Annotated[Period, Field(description="Signal period for STOCH")] = 3,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_stochastic_oscillator",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.stochastic_oscillator(
                bars["high"], bars["low"], bars["close"], period, signal_period
            ),
        )

    @server.tool(
        name="calculate_williams_r",
        description=(
            "Calculate the Williams %R (WILLR) for a given trading pair "
            "using exchange OHLCV data"
        ),
    )
    async def calculate_williams_r(
        symbol: Symbol,
        timeframe: TimeframeParam = DEFAULT_TIMEFRAME,
        period: Annotated[Period, Field(description="Period length for WILLR")] = 14,
        limit: Limit = DEFAULT_LIMIT,
    ) -> str:
        return await run_indicator_tool(
            fetcher,
            "calculate_williams_r",
            symbol,
            timeframe,
            limit,
            lambda bars: indicators.williams_r(bars["high"], bars["low"], bars["close"], period),
        )
