"""Compound-interest projection and everything built on top of it."""

from compound_simulator.core.dashboard import (
    chart_points,
    format_currency,
    format_percentage,
    schedule_rows,
)
from compound_simulator.core.insight import (
    FALLBACK_INSIGHT,
    build_insight_prompt,
    get_financial_insight,
)
from compound_simulator.core.projection import monthly_rate, project, total_months
from compound_simulator.core.summary import summarize, yield_percentage

__all__ = [
    "project",
    "total_months",
    "monthly_rate",
    "summarize",
    "yield_percentage",
    "chart_points",
    "schedule_rows",
    "format_currency",
    "format_percentage",
    "build_insight_prompt",
    "get_financial_insight",
    "FALLBACK_INSIGHT",
]
