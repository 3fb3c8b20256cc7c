"""Custom exceptions for clearer error handling across the server."""


class IndicatorServerError(Exception):
    """Base exception for all server-specific errors."""


class ConfigError(IndicatorServerError):
    """Raised when environment or CLI configuration is invalid."""


class CapabilityError(IndicatorServerError):
    """Raised when the configured exchange cannot serve historical bars."""


class MalformedResponseError(IndicatorServerError):
    """Raised when the exchange returns bars in an unexpected shape."""


class DataProviderError(IndicatorServerError):
    """Raised when market data retrieval fails for any reason."""

    prefix = "Failed to fetch OHLCV data: "

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}{detail}")
        self.detail = detail
