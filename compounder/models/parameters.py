"""Calculator parameter models."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Union

DEFAULT_STARTING_CAPITAL = 100000.0
DEFAULT_PROFIT_PER_TRADE = 5.0
DEFAULT_NUM_TRADES = 50


class InputSource(str, Enum):
    """Where a raw parameter value came from."""

    DIRECT = "direct"  # slider or numeric entry
    URL = "url"  # restored from a share link


@dataclass(frozen=True)
class ParameterBounds:
    """Inclusive acceptance range for the rate and trade count."""

    min_profit_percent: float
    max_profit_percent: float
    min_trades: int
    max_trades: int

    def accepts_profit(self, value: float) -> bool:
        return self.min_profit_percent <= value <= self.max_profit_percent

    def accepts_trades(self, value: int) -> bool:
        return self.min_trades <= value <= self.max_trades


# Share links tolerate scenarios the interactive controls cannot reach.
BOUNDS_BY_SOURCE: Dict[InputSource, ParameterBounds] = {
    InputSource.DIRECT: ParameterBounds(
        min_profit_percent=0.1, max_profit_percent=10.0, min_trades=1, max_trades=100
    ),
    InputSource.URL: ParameterBounds(
        min_profit_percent=0.1, max_profit_percent=1000.0, min_trades=1, max_trades=10000
    ),
}


def bounds_for(source: Union[InputSource, str]) -> ParameterBounds:
    """Get acceptance bounds for an input source (enum or its string value)."""
    return BOUNDS_BY_SOURCE[InputSource(source)]


@dataclass(frozen=True)
class Parameters:
    """Complete, validated parameter set for one computation."""

    starting_capital: float = DEFAULT_STARTING_CAPITAL
    profit_per_trade: float = DEFAULT_PROFIT_PER_TRADE  # percent
    num_trades: int = DEFAULT_NUM_TRADES

    def with_overrides(self, overrides: "ParameterOverrides") -> "Parameters":
        """Return a copy with every field set in overrides replaced."""
        return replace(self, **overrides.as_dict())


@dataclass(frozen=True)
class ParameterOverrides:
    """Partial parameter set; None means keep the current value."""

    starting_capital: Optional[float] = None
    profit_per_trade: Optional[float] = None
    num_trades: Optional[int] = None

    def as_dict(self) -> Dict[str, float]:
        """Fields that are set, keyed by Parameters field name."""
        return {
            name: value
            for name, value in (
                ("starting_capital", self.starting_capital),
                ("profit_per_trade", self.profit_per_trade),
                ("num_trades", self.num_trades),
            )
            if value is not None
        }

    @property
    def is_empty(self) -> bool:
        return not self.as_dict()
