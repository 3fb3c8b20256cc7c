"""ccxt exchange construction for the allow-listed exchange ids."""

from __future__ import annotations

from typing import Any

import ccxt

from crypto_indicators.domain.models import ExchangeId


def exchange_options(timeout_ms: int | None = None) -> dict[str, Any]:
    """Return the ccxt constructor options shared by every exchange."""
    options: dict[str, Any] = {"enableRateLimit": True}
    if timeout_ms is not None:
        options["timeout"] = timeout_ms
    return options


def build_exchange(exchange_id: ExchangeId, timeout_ms: int | None = None) -> ccxt.Exchange:
    """Build the ccxt client for a validated exchange id."""
    options = exchange_options(timeout_ms)
    match exchange_id:
        case ExchangeId.BINANCE:
            return ccxt.binance(options)
        case ExchangeId.KRAKEN:
            return ccxt.kraken(options)
        case ExchangeId.COINBASE:
            return ccxt.coinbase(options)
        case ExchangeId.BYBIT:
            return ccxt.bybit(options)
        case ExchangeId.OKX:
            return ccxt.okx(options)
        case ExchangeId.KUCOIN:
            return ccxt.kucoin(options)
        case ExchangeId.GATE:
            return ccxt.gate(options)
        case ExchangeId.HUOBI:
            # ccxt renamed the huobi client to htx
            return ccxt.htx(options)
        case ExchangeId.BITFINEX:
            return ccxt.bitfinex(options)
        case ExchangeId.MEXC:
            return ccxt.mexc(options)
    raise ValueError(f"No exchange client for {exchange_id!r}")
