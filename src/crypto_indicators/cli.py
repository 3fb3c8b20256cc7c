"""Command-line interface for the indicator server."""

from __future__ import annotations

import argparse
import sys

from crypto_indicators.config import LOG_LEVELS, TRANSPORTS, Settings
from crypto_indicators.domain.errors import ConfigError
from crypto_indicators.domain.models import ExchangeId
from crypto_indicators.server import run


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="MCP server exposing technical indicators over exchange OHLCV data"
    )
    parser.add_argument(
        "--exchange",
        type=str,
        help=f"Exchange id, one of: {', '.join(member.value for member in ExchangeId)}",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, help="MCP transport")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Log level")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "--exchange-timeout-ms",
        type=int,
        help="Request timeout passed to the exchange client",
    )
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.exchange:
        overrides["exchange_name"] = args.exchange.strip().lower()
    if args.transport:
        overrides["transport"] = args.transport
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.exchange_timeout_ms is not None:
        overrides["exchange_timeout_ms"] = args.exchange_timeout_ms
    return settings.with_overrides(**overrides)


def main() -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args()
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except (ConfigError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
