"""Data models for the compounding calculator."""

from compounder.models.parameters import (
    BOUNDS_BY_SOURCE,
    DEFAULT_NUM_TRADES,
    DEFAULT_PROFIT_PER_TRADE,
    DEFAULT_STARTING_CAPITAL,
    InputSource,
    ParameterBounds,
    ParameterOverrides,
    Parameters,
    bounds_for,
)
from compounder.models.trade import (
    Calculation,
    CompoundResult,
    TradeDetailRow,
    TradeRecord,
)

__all__ = [
    # Parameters
    "BOUNDS_BY_SOURCE",
    "DEFAULT_NUM_TRADES",
    "DEFAULT_PROFIT_PER_TRADE",
    "DEFAULT_STARTING_CAPITAL",
    "InputSource",
    "ParameterBounds",
    "ParameterOverrides",
    "Parameters",
    "bounds_for",
    # Trades
    "Calculation",
    "CompoundResult",
    "TradeDetailRow",
    "TradeRecord",
]
