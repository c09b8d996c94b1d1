"""Helpers that shape a schedule for the dashboard chart, table and cards."""

from __future__ import annotations

import math
from typing import List, Sequence

from compound_simulator.schemas.simulation import ScheduleRow, SimulationResult

PLACEHOLDER = "—"


def chart_points(results: Sequence[SimulationResult], max_points: int = 60) -> List[SimulationResult]:
    """
    Thin out a long schedule so the chart is not crowded.

    Keeps every ``step``-th month, with step = ceil(len / max_points), and
    always keeps the final month.
    """
    count = len(results)
    if count <= max_points:
        return list(results)

    step = math.ceil(count / max_points)
    return [row for index, row in enumerate(results) if index % step == 0 or index == count - 1]


def schedule_rows(results: Sequence[SimulationResult]) -> List[ScheduleRow]:
    """Table rows with the interest earned in each individual month."""
    rows: List[ScheduleRow] = []
    previous_interest = None
    for result in results:
        if previous_interest is None:
            interest_this_month = 0.0
        else:
            interest_this_month = round(result.totalInterest - previous_interest, 2)
        previous_interest = result.totalInterest

        rows.append(
            ScheduleRow(
                month=result.month,
                interestThisMonth=interest_this_month,
                totalInterest=result.totalInterest,
                monthlyContribution=result.monthlyContribution,
                totalInvested=result.totalInvested,
                totalAmount=result.totalAmount,
            )
        )
    return rows


def format_currency(value: float) -> str:
    """Format as Brazilian reais, e.g. ``R$ 1.234,56``."""
    if not math.isfinite(value):
        return PLACEHOLDER
    # swap the US separators for pt-BR ones
    digits = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if round(value, 2) < 0 else ""
    return f"{sign}R$ {digits}"


def format_percentage(value: float) -> str:
    if not math.isfinite(value):
        return PLACEHOLDER
    return f"{value:.2f}%"
