"""Input validation."""

from compounder.validation.validator import (
    RawValue,
    validate_capital,
    validate_profit_rate,
    validate_trade_count,
)

__all__ = [
    "RawValue",
    "validate_capital",
    "validate_profit_rate",
    "validate_trade_count",
]
