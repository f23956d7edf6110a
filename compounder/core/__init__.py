"""Calculation pipeline and session orchestration."""

from compounder.core.calculator import CalculatorSession, calculate, create_session
from compounder.core.logging_setup import setup_logging

__all__ = [
    "CalculatorSession",
    "calculate",
    "create_session",
    "setup_logging",
]
