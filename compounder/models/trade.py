"""Trade trajectory and calculation result models."""

from dataclasses import dataclass
from typing import Tuple

from compounder.models.parameters import Parameters


@dataclass(frozen=True)
class TradeRecord:
    """Capital after one compounding step."""

    trade: int  # 0 is the seed entry
    capital: float
    profit: float  # capital gained on this trade


@dataclass(frozen=True)
class CompoundResult:
    """Output of the compounding engine."""

    final: float
    history: Tuple[TradeRecord, ...]


@dataclass(frozen=True)
class Calculation:
    """Engine output plus derived summary for one parameter set."""

    parameters: Parameters
    history: Tuple[TradeRecord, ...]
    final_capital: float
    total_profit: float
    total_return_percent: float

    @property
    def seed(self) -> TradeRecord:
        """Synthetic trade 0 entry holding the starting capital."""
        return TradeRecord(trade=0, capital=self.parameters.starting_capital, profit=0.0)

    @property
    def trajectory(self) -> Tuple[TradeRecord, ...]:
        """Seed entry followed by the engine history."""
        return (self.seed,) + self.history

    @property
    def average_profit_per_trade_percent(self) -> float:
        """Per-trade return, constant by construction."""
        return self.parameters.profit_per_trade

    @property
    def compound_multiplier(self) -> float:
        """Final capital over starting capital (e.g., 1.15 = 15% growth)."""
        return self.final_capital / self.parameters.starting_capital


@dataclass(frozen=True)
class TradeDetailRow:
    """One row of the trade details table."""

    trade: int
    starting_capital: float
    profit: float
    ending_capital: float
