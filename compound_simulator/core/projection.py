from __future__ import annotations

from typing import List

from compound_simulator.schemas.simulation import (
    PeriodType,
    RateType,
    SimulationInputs,
    SimulationResult,
)


def total_months(inputs: SimulationInputs) -> int:
    """Number of monthly steps covered by ``period``/``periodType``."""
    if inputs.periodType == PeriodType.YEARS:
        return inputs.period * 12
    return inputs.period


def monthly_rate(inputs: SimulationInputs) -> float:
    """
    Monthly compounding rate as a decimal.

    A yearly rate is converted to its equivalent monthly rate,
    (1 + i_a)^(1/12) - 1, so twelve months of compounding reproduce it.
    """
    if inputs.rateType == RateType.YEARLY:
        return (1.0 + inputs.interestRate / 100.0) ** (1.0 / 12.0) - 1.0
    return inputs.interestRate / 100.0


def project(inputs: SimulationInputs) -> List[SimulationResult]:
    """
    Build a month-by-month table from month 0..total_months (inclusive).

    Order of operations (per month):
      1) Interest accrues on the balance carried over from last month.
      2) The monthly contribution is added (it earns nothing this month).
      3) Record row with totals rounded to cents.

    Month 0 is the untouched principal, recorded without rounding.
    Inputs are not validated: a non-positive month count yields month 0 only.
    """
    rate = monthly_rate(inputs)
    contribution = inputs.monthlyContribution

    total = float(inputs.initialAmount)
    invested = float(inputs.initialAmount)
    interest = 0.0

    rows: List[SimulationResult] = [
        SimulationResult(
            month=0,
            totalInvested=invested,
            totalInterest=interest,
            totalAmount=total,
            monthlyContribution=0.0,
        )
    ]

    for month in range(1, total_months(inputs) + 1):
        # 1) growth on last month's balance only
        interest_this_month = total * rate

        # 2) contribution lands at the end of the month
        total += interest_this_month + contribution
        invested += contribution
        interest += interest_this_month

        rows.append(
            SimulationResult(
                month=month,
                totalInvested=round(invested, 2),
                totalInterest=round(interest, 2),
                totalAmount=round(total, 2),
                monthlyContribution=contribution,
            )
        )

    return rows


__all__ = [
    "total_months",
    "monthly_rate",
    "project",
]
