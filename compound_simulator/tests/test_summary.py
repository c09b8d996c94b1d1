from __future__ import annotations

import math
from math import isclose

import pytest

from compound_simulator.core.projection import project
from compound_simulator.core.summary import summarize, yield_percentage
from compound_simulator.schemas.simulation import (
    PeriodType,
    RateType,
    SimulationInputs,
    SimulationResult,
)


def make_inputs(**overrides) -> SimulationInputs:
    values = {
        "initialAmount": 1000.0,
        "monthlyContribution": 100.0,
        "interestRate": 1.0,
        "rateType": RateType.MONTHLY,
        "period": 1,
        "periodType": PeriodType.MONTHS,
    }
    values.update(overrides)
    return SimulationInputs(**values)


def test_summary_copies_last_month():
    inputs = make_inputs(period=10, periodType=PeriodType.YEARS, interestRate=8.0, rateType=RateType.YEARLY)
    rows = project(inputs)

    summary = summarize(rows)

    last = rows[-1]
    assert summary.totalAmount == last.totalAmount
    assert summary.totalInvested == last.totalInvested
    assert summary.totalInterest == last.totalInterest


def test_yield_is_interest_over_invested():
    summary = summarize(project(make_inputs()))

    # 10 of interest on 1100 invested
    assert isclose(summary.yieldPercentage, 10.0 / 1100.0 * 100, rel_tol=1e-12)


def test_nothing_invested_gives_undefined_yield():
    rows = project(make_inputs(initialAmount=0.0, monthlyContribution=0.0, period=3))

    summary = summarize(rows)

    assert all(row.totalAmount == 0 for row in rows)
    assert math.isnan(summary.yieldPercentage)


def test_yield_with_interest_but_nothing_invested_is_infinite():
    assert yield_percentage(5.0, 0.0) == math.inf
    assert yield_percentage(-5.0, 0.0) == -math.inf


def test_undefined_yield_serializes_as_null():
    summary = summarize(project(make_inputs(initialAmount=0.0, monthlyContribution=0.0)))

    assert summary.model_dump(mode="json")["yieldPercentage"] is None
    # python-mode dumps keep the raw value
    assert math.isnan(summary.model_dump()["yieldPercentage"])


def test_single_entry_schedule_has_zero_yield():
    summary = summarize(project(make_inputs(period=0)))

    assert summary.totalAmount == 1000.0
    assert summary.yieldPercentage == 0.0


def test_empty_schedule_is_rejected():
    with pytest.raises(ValueError):
        summarize([])


def test_summary_accepts_hand_built_rows():
    rows = [
        SimulationResult(month=0, totalInvested=500.0, totalInterest=0.0, totalAmount=500.0, monthlyContribution=0.0),
        SimulationResult(month=1, totalInvested=600.0, totalInterest=30.0, totalAmount=630.0, monthlyContribution=100.0),
    ]

    summary = summarize(rows)

    assert summary.totalAmount == 630.0
    assert isclose(summary.yieldPercentage, 5.0)
