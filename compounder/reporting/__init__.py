"""Formatting and tables for presenting results."""

from compounder.reporting.format import (
    format_capital_tick,
    format_currency,
    format_percent,
    trade_detail_rows,
)

__all__ = [
    "format_capital_tick",
    "format_currency",
    "format_percent",
    "trade_detail_rows",
]
