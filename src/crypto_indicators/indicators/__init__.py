"""Technical indicators over OHLCV columns, backed by pandas_ta."""

from .momentum import (
    ChaikinOscillatorResult,
    IchimokuCloudResult,
    PercentageOscillatorResult,
    StochasticOscillatorResult,
    awesome_oscillator,
    chaikin_oscillator,
    ichimoku_cloud,
    percentage_price_oscillator,
    percentage_volume_oscillator,
    price_momentum,
    price_rate_of_change,
    relative_strength_index,
    stochastic_oscillator,
    williams_r,
)
from .volatility import (
    BandsResult,
    ProjectionOscillatorResult,
    acceleration_bands,
    bollinger_bands,
    projection_oscillator,
)
from .volume import (
    accumulation_distribution,
    chaikin_money_flow,
    ease_of_movement,
    force_index,
    money_flow_index,
    negative_volume_index,
    on_balance_volume,
    volume_price_trend,
    volume_weighted_average_price,
)

__all__ = [
    "BandsResult",
    "ChaikinOscillatorResult",
    "IchimokuCloudResult",
    "PercentageOscillatorResult",
    "ProjectionOscillatorResult",
    "StochasticOscillatorResult",
    "acceleration_bands",
    "accumulation_distribution",
    "awesome_oscillator",
    "bollinger_bands",
    "chaikin_money_flow",
    "chaikin_oscillator",
    "ease_of_movement",
    "force_index",
    "ichimoku_cloud",
    "money_flow_index",
    "negative_volume_index",
    "on_balance_volume",
    "percentage_price_oscillator",
    "percentage_volume_oscillator",
    "price_momentum",
    "price_rate_of_change",
    "projection_oscillator",
    "relative_strength_index",
    "stochastic_oscillator",
    "volume_price_trend",
    "volume_weighted_average_price",
    "williams_r",
]
