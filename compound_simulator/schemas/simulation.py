"""Data contracts for compound-interest simulations."""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

MAX_MONTHS = 1200


class RateType(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class PeriodType(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class SimulationInputs(BaseModel):
    """Parameters of one simulation run.

    ``interestRate`` is a percentage (``1`` means 1%). No range checks are
    applied here so the engine can be driven with degenerate values; the
    HTTP boundary uses :class:`SimulationRequest` instead.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialAmount: float
    monthlyContribution: float
    interestRate: float
    rateType: RateType
    period: int
    periodType: PeriodType


class SimulationRequest(SimulationInputs):
    """Validated inputs accepted by the API, defaulting to the dashboard form."""

    initialAmount: float = Field(1000.0, ge=0, allow_inf_nan=False, description="Principal at month 0.")
    monthlyContribution: float = Field(
        100.0,
        ge=0,
        allow_inf_nan=False,
        description="Amount added at the end of each month.",
    )
    interestRate: float = Field(
        1.0,
        ge=-100,
        allow_inf_nan=False,
        description="Interest rate as a percentage, per rateType.",
    )
    rateType: RateType = RateType.MONTHLY
    period: int = Field(5, ge=1, le=MAX_MONTHS, description="Length of the simulation, per periodType.")
    periodType: PeriodType = PeriodType.YEARS

    @model_validator(mode="after")
    def check_horizon(self) -> "SimulationRequest":
        months = self.period * 12 if self.periodType == PeriodType.YEARS else self.period
        if months > MAX_MONTHS:
            raise ValueError(f"simulation cannot exceed {MAX_MONTHS} months ({MAX_MONTHS // 12} years)")
        return self

    def to_inputs(self) -> SimulationInputs:
        return SimulationInputs.model_validate(self.model_dump())


class SimulationResult(BaseModel):
    """Account state at the end of one month."""

    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    month: int
    totalInvested: float
    totalInterest: float
    totalAmount: float
    monthlyContribution: float


class SummaryData(BaseModel):
    """Final totals of a run. ``yieldPercentage`` is nan/inf when nothing was invested."""

    model_config = ConfigDict(extra="forbid", frozen=True, ser_json_inf_nan="null")

    totalAmount: float
    totalInvested: float
    totalInterest: float
    yieldPercentage: float

    @field_serializer("yieldPercentage", when_used="json")
    def _serialize_yield(self, value: float) -> Optional[float]:
        return value if math.isfinite(value) else None


class ScheduleRow(BaseModel):
    """Row of the month-by-month table."""

    model_config = ConfigDict(ser_json_inf_nan="null")

    month: int
    interestThisMonth: float
    totalInterest: float
    monthlyContribution: float
    totalInvested: float
    totalAmount: float


class SimulationResponse(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="null")

    inputs: SimulationInputs
    totalMonths: int
    monthlyRate: float
    results: List[SimulationResult]
    summary: SummaryData
    chart: List[SimulationResult]
    table: List[ScheduleRow]


class InsightResponse(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="null")

    summary: SummaryData
    insight: str
