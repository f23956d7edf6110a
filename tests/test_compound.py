"""Tests for the compounding engine."""

import math

import pytest

from compounder.exceptions import InvalidParameterError
from compounder.models import TradeRecord
from compounder.portfolio import compound_trades


def test_three_trades_at_ten_percent() -> None:
    result = compound_trades(1000, 10, 3)

    assert [r.trade for r in result.history] == [1, 2, 3]
    assert [r.capital for r in result.history] == pytest.approx([1100, 1210, 1331])
    assert [r.profit for r in result.history] == pytest.approx([100, 110, 121])
    assert result.final == pytest.approx(1331)


def test_default_scenario_matches_closed_form() -> None:
    result = compound_trades(100000, 5, 50)

    assert len(result.history) == 50
    assert result.final == pytest.approx(100000 * 1.05**50)
    assert result.final == pytest.approx(1146739.98, abs=0.01)


@pytest.mark.parametrize("n", [0, 1, 7, 100, 10000])
def test_history_length_equals_trade_count(n: int) -> None:
    assert len(compound_trades(2500.0, 1.5, n).history) == n


def test_zero_trades_returns_start_and_empty_history() -> None:
    result = compound_trades(1234.5, 7, 0)

    assert result.final == 1234.5
    assert result.history == ()


def test_zero_rate_is_flat() -> None:
    result = compound_trades(5000, 0, 25)

    assert result.final == 5000
    assert all(r.capital == 5000 and r.profit == 0 for r in result.history)


def test_each_step_compounds_previous_capital() -> None:
    start, rate = 100000.0, 3.7
    result = compound_trades(start, rate, 60)

    capitals = [start] + [r.capital for r in result.history]
    for before, after in zip(capitals, capitals[1:]):
        assert after == pytest.approx(before * (1 + rate / 100), rel=1e-12)


def test_profit_is_capital_difference() -> None:
    start = 750.0
    result = compound_trades(start, 2.5, 20)

    previous = start
    for record in result.history:
        assert record.profit >= 0
        assert record.profit == pytest.approx(record.capital - previous)
        previous = record.capital


def test_final_is_last_history_capital() -> None:
    result = compound_trades(42.0, 9.9, 13)
    assert result.final == result.history[-1].capital


def test_repeated_calls_are_identical() -> None:
    assert compound_trades(100000, 5, 50) == compound_trades(100000, 5, 50)


def test_negative_rate_decays() -> None:
    result = compound_trades(1000, -10, 2)

    assert [r.capital for r in result.history] == pytest.approx([900, 810])
    assert [r.profit for r in result.history] == pytest.approx([-100, -90])


def test_history_records_are_trade_records() -> None:
    record = compound_trades(100, 1, 1).history[0]
    assert isinstance(record, TradeRecord)
    assert record.trade == 1
    assert record.capital == pytest.approx(101)
    assert record.profit == pytest.approx(1)


@pytest.mark.parametrize("n", [-1, 2.0, True, "3"])
def test_invalid_trade_count_raises(n) -> None:
    with pytest.raises(InvalidParameterError):
        compound_trades(1000, 5, n)


@pytest.mark.parametrize(
    "capital, rate",
    [(math.nan, 5), (math.inf, 5), (1000, math.nan), (1000, -math.inf)],
)
def test_non_finite_inputs_raise(capital, rate) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        compound_trades(capital, rate, 3)
    # Also usable as a plain ValueError
    assert isinstance(excinfo.value, ValueError)


def test_capital_too_large_for_float_raises() -> None:
    with pytest.raises(InvalidParameterError):
        compound_trades(10**400, 5, 1)
