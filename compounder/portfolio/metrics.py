"""Summary metrics derived from a compounding run."""

import logging
from dataclasses import dataclass

from compounder.exceptions import MetricsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerformanceMetrics:
    """Statistics for compound growth."""

    starting_capital: float
    final_capital: float
    total_profit: float
    total_return_percent: float

    @property
    def growth_rate(self) -> float:
        """Total growth as a decimal (e.g., 0.15 = 15% growth)."""
        return self.total_return_percent / 100


def derive_metrics(starting_capital: float, final_capital: float) -> PerformanceMetrics:
    """
    Derive total profit and total return from start and end capital.

    Args:
        starting_capital: Capital before the first trade
        final_capital: Capital after the last trade

    Returns:
        PerformanceMetrics for the run

    Raises:
        MetricsError: If starting_capital is zero, since the return is undefined
    """
    if starting_capital == 0:
        logger.error(
            f"Cannot derive total return from zero starting capital "
            f"(final=${final_capital:,.2f})"
        )
        raise MetricsError("Total return is undefined for zero starting capital")

    return PerformanceMetrics(
        starting_capital=starting_capital,
        final_capital=final_capital,
        total_profit=final_capital - starting_capital,
        total_return_percent=(final_capital / starting_capital - 1) * 100,
    )
