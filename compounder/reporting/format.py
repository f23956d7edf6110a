"""Display helpers for calculator results.

Everything here consumes a finished Calculation; no compounding happens
in this module.
"""

from typing import List

from compounder.models import Calculation, TradeDetailRow


def format_currency(value: float) -> str:
    """
    Format an amount with thousands separators.

    Whole amounts are shown without decimals, anything else with two.

    Args:
        value: Amount in dollars

    Returns:
        Formatted amount without currency symbol (e.g., "1,146,739.98")
    """
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def format_capital_tick(value: float) -> str:
    """Short axis label for a capital value: $1.2M above a million, else $250k."""
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    return f"${value / 1000:.0f}k"


def format_percent(value: float, digits: int = 2) -> str:
    """Percentage with a fixed number of decimals (e.g., "33.10%")."""
    return f"{value:.{digits}f}%"


def trade_detail_rows(calculation: Calculation) -> List[TradeDetailRow]:
    """
    Build the trade details table, seed row included.

    Args:
        calculation: Result to tabulate

    Returns:
        One row per trajectory entry; each trade starts with the capital
        the previous one ended with
    """
    rows = []
    previous_capital = calculation.parameters.starting_capital
    for record in calculation.trajectory:
        rows.append(
            TradeDetailRow(
                trade=record.trade,
                starting_capital=previous_capital,
                profit=record.profit,
                ending_capital=record.capital,
            )
        )
        previous_capital = record.capital
    return rows
