"""Signal strategies producing per-bar BUY/HOLD/SELL actions."""

from .momentum import (
    awesome_oscillator_strategy,
    ichimoku_cloud_strategy,
    momentum_strategy,
    rsi2_strategy,
    stochastic_oscillator_strategy,
    williams_r_strategy,
)
from .volatility import (
    acceleration_bands_strategy,
    bollinger_bands_strategy,
    projection_oscillator_strategy,
)
from .volume import (
    chaikin_money_flow_strategy,
    ease_of_movement_strategy,
    force_index_strategy,
    money_flow_index_strategy,
    negative_volume_index_strategy,
    volume_weighted_average_price_strategy,
)

__all__ = [
    "acceleration_bands_strategy",
    "awesome_oscillator_strategy",
    "bollinger_bands_strategy",
    "chaikin_money_flow_strategy",
    "ease_of_movement_strategy",
    "force_index_strategy",
    "ichimoku_cloud_strategy",
    "momentum_strategy",
    "money_flow_index_strategy",
    "negative_volume_index_strategy",
    "projection_oscillator_strategy",
    "rsi2_strategy",
    "stochastic_oscillator_strategy",
    "volume_weighted_average_price_strategy",
    "williams_r_strategy",
]
