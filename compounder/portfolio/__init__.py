"""Compounding engine and summary metrics."""

from compounder.portfolio.compound import compound_trades
from compounder.portfolio.metrics import PerformanceMetrics, derive_metrics

__all__ = [
    "PerformanceMetrics",
    "compound_trades",
    "derive_metrics",
]
