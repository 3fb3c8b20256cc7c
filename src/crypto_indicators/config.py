"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from crypto_indicators.domain.errors import ConfigError
from crypto_indicators.domain.models import ExchangeId

TRANSPORTS = ("stdio", "sse", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_optional_positive_int(value: str | None, *, field_name: str) -> int | None:
    """Parse optional positive integer values from env strings."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer, got {text!r}") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def parse_optional_text(value: str | None) -> str | None:
    """Return stripped text, or None when blank."""
    if value is None:
        return None
    text = value.strip()
    return text or None


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    exchange_name: str = "binance"
    transport: str = "stdio"
    log_level: str = "INFO"
    log_file: str | None = None
    exchange_timeout_ms: int | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            exchange_name=str(os.getenv("EXCHANGE_NAME", "binance")).strip().lower(),
            transport=str(os.getenv("MCP_TRANSPORT", "stdio")).strip().lower(),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
            log_file=parse_optional_text(os.getenv("LOG_FILE")),
            exchange_timeout_ms=parse_optional_positive_int(
                os.getenv("EXCHANGE_TIMEOUT_MS"),
                field_name="exchange_timeout_ms",
            ),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def exchange_id(self) -> ExchangeId:
        """Return the allow-listed exchange id."""
        return ExchangeId.parse(self.exchange_name)

    def validate(self) -> Self:
        """Validate settings fields."""
        self.exchange_id()
        if self.transport not in TRANSPORTS:
            raise ConfigError(f"transport must be one of {', '.join(TRANSPORTS)}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.exchange_timeout_ms is not None and self.exchange_timeout_ms <= 0:
            raise ConfigError("exchange_timeout_ms must be positive")
        return self
