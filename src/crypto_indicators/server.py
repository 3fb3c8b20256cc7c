"""MCP server wiring."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from crypto_indicators.config import Settings
from crypto_indicators.data.exchanges import build_exchange
from crypto_indicators.data.ohlcv_fetcher import OhlcvFetcher
from crypto_indicators.logging.logger import setup_logger
from crypto_indicators.tools import TOOL_MODULES
from crypto_indicators.tools.common import ToolServer

SERVER_NAME = "crypto-indicators"


def build_fetcher(settings: Settings) -> OhlcvFetcher:
    """Build the process-wide fetcher for the configured exchange."""
    exchange = build_exchange(settings.exchange_id(), timeout_ms=settings.exchange_timeout_ms)
    return OhlcvFetcher(exchange)


def register_tools(server: ToolServer, fetcher: OhlcvFetcher) -> None:
    """Register every tool family against one shared fetcher."""
    for module in TOOL_MODULES:
        module.register(server, fetcher)


def build_server(settings: Settings, fetcher: OhlcvFetcher | None = None) -> FastMCP:
    """Create the FastMCP server with all indicator and strategy tools."""
    server = FastMCP(SERVER_NAME)
    register_tools(server, fetcher or build_fetcher(settings))
    return server


def run(settings: Settings) -> int:
    """Serve tools until the transport closes."""
    logger = setup_logger(settings.log_level, settings.log_file)
    server = build_server(settings)
    logger.info(
        "starting | exchange %s | transport %s",
        settings.exchange_id().value,
        settings.transport,
    )
    server.run(transport=settings.transport)
    return 0
