"""Domain models and errors."""

from .errors import (
    CapabilityError,
    ConfigError,
    DataProviderError,
    IndicatorServerError,
    MalformedResponseError,
)
from .models import Action, ExchangeId, PriceSeries, Timeframe

__all__ = [
    "Action",
    "CapabilityError",
    "ConfigError",
    "DataProviderError",
    "ExchangeId",
    "IndicatorServerError",
    "MalformedResponseError",
    "PriceSeries",
    "Timeframe",
]
