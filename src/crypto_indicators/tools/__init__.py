"""MCP tool registrations."""

from . import (
    momentum_indicators,
    momentum_strategies,
    volatility_strategies,
    volume_indicators,
    volume_strategies,
)

TOOL_MODULES = (
    momentum_indicators,
    volume_indicators,
    momentum_strategies,
    volatility_strategies,
    volume_strategies,
)

__all__ = ["TOOL_MODULES"]
