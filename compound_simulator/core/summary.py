"""Reduce a projected schedule to its final totals."""

from __future__ import annotations

import math
from typing import Sequence

from compound_simulator.schemas.simulation import SimulationResult, SummaryData


def yield_percentage(total_interest: float, total_invested: float) -> float:
    """Interest earned as a percentage of the amount invested.

    Nothing invested gives nan for 0/0 and a signed infinity otherwise.
    """
    if total_invested == 0:
        if total_interest == 0:
            return math.nan
        return math.copysign(math.inf, total_interest)
    return total_interest / total_invested * 100


def summarize(results: Sequence[SimulationResult]) -> SummaryData:
    """Summarise the last entry of a schedule produced by ``project``."""
    if not results:
        raise ValueError("cannot summarize an empty schedule")

    last = results[-1]
    return SummaryData(
        totalAmount=last.totalAmount,
        totalInvested=last.totalInvested,
        totalInterest=last.totalInterest,
        yieldPercentage=yield_percentage(last.totalInterest, last.totalInvested),
    )
