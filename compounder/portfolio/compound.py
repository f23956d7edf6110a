"""Compounding calculations."""

import logging
import math
from typing import List

from compounder.exceptions import InvalidParameterError
from compounder.models import CompoundResult, TradeRecord

logger = logging.getLogger(__name__)


def _require_finite(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}", name, value)
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidParameterError(f"{name} is too large for a float", name, value) from None
    if not math.isfinite(as_float):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}", name, value)
    return as_float


def compound_trades(
    starting_capital: float,
    profit_rate_percent: float,
    num_trades: int,
) -> CompoundResult:
    """
    Compound capital over a fixed number of equally profitable trades.

    Each trade applies the same percentage to the capital left by the
    previous trade. Negative rates are allowed and model decay; bounding
    the rate is left to the validator.

    Args:
        starting_capital: Capital before the first trade
        profit_rate_percent: Profit per trade in percent (5 = 5%)
        num_trades: Number of trades to execute (0 returns no history)

    Returns:
        CompoundResult with the final capital and one TradeRecord per trade

    Raises:
        InvalidParameterError: If num_trades is negative or not an integer,
            or if capital or rate is not finite
    """
    capital = _require_finite("starting_capital", starting_capital)
    rate = _require_finite("profit_rate_percent", profit_rate_percent) / 100
    if isinstance(num_trades, bool) or not isinstance(num_trades, int):
        raise InvalidParameterError(
            f"num_trades must be an integer, got {num_trades!r}", "num_trades", num_trades
        )
    if num_trades < 0:
        raise InvalidParameterError(
            f"num_trades must be >= 0, got {num_trades}", "num_trades", num_trades
        )

    history: List[TradeRecord] = []
    for trade in range(1, num_trades + 1):
        profit = capital * rate
        capital = capital + profit
        history.append(TradeRecord(trade=trade, capital=capital, profit=profit))

    logger.debug(
        f"Compounded {num_trades} trades at {profit_rate_percent}%: "
        f"${starting_capital:,.2f} -> ${capital:,.2f}"
    )
    return CompoundResult(final=capital, history=tuple(history))
