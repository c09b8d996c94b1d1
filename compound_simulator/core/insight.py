"""Natural-language tips for a simulation, generated by an external LLM.

The model is reached through an OpenAI-compatible chat-completions API. Any
failure is logged and replaced by ``FALLBACK_INSIGHT`` so callers always get
text back.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from openai import OpenAI

from compound_simulator.config import settings
from compound_simulator.schemas.simulation import (
    PeriodType,
    RateType,
    SimulationInputs,
    SummaryData,
)

logger = logging.getLogger(__name__)

FALLBACK_INSIGHT = (
    "We couldn't generate insights right now. But remember: consistency is "
    "the key to financial success!"
)

SYSTEM_PROMPT = (
    "You are an expert financial advisor. Be motivating and technical, "
    "and keep each tip short."
)


def build_insight_prompt(summary: SummaryData, inputs: SimulationInputs) -> str:
    """Describe the inputs and results of a run; rates are plain numbers in percent."""
    rate_unit = "per year" if inputs.rateType == RateType.YEARLY else "per month"
    period_unit = "years" if inputs.periodType == PeriodType.YEARS else "months"
    if math.isfinite(summary.yieldPercentage):
        yield_text = f"{summary.yieldPercentage:.2f}"
    else:
        yield_text = "undefined"

    return (
        "As an expert financial advisor, analyse this compound interest simulation:\n"
        f"- Initial amount: {inputs.initialAmount:.2f}\n"
        f"- Monthly contribution: {inputs.monthlyContribution:.2f}\n"
        f"- Interest rate (percent): {inputs.interestRate:g} {rate_unit}\n"
        f"- Period: {inputs.period} {period_unit}\n"
        "\n"
        "Results:\n"
        f"- Final total amount: {summary.totalAmount:.2f}\n"
        f"- Total invested: {summary.totalInvested:.2f}\n"
        f"- Total interest: {summary.totalInterest:.2f}\n"
        f"- Yield on invested capital (percent): {yield_text}\n"
        "\n"
        "Give 3 short, practical tips to help the user improve this result "
        "or understand the power of this investment."
    )


def _default_client() -> Optional[OpenAI]:
    if not settings.OPENAI_API_KEY:
        return None
    return OpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.INSIGHT_BASE_URL,
        timeout=settings.INSIGHT_TIMEOUT,
    )


def insight_enabled() -> bool:
    return bool(settings.OPENAI_API_KEY)


def get_financial_insight(
    summary: SummaryData,
    inputs: SimulationInputs,
    client: Optional[OpenAI] = None,
) -> str:
    """Ask the model for three tips; never raises."""
    client = client or _default_client()
    if client is None:
        logger.info("OPENAI_API_KEY not configured; returning fallback insight")
        return FALLBACK_INSIGHT

    try:
        response = client.chat.completions.create(
            model=settings.INSIGHT_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_insight_prompt(summary, inputs)},
            ],
            max_tokens=400,
            temperature=0.7,
        )
        text = (response.choices[0].message.content or "").strip()
    except Exception as e:
        logger.warning("Insight generation failed: %s", e)
        return FALLBACK_INSIGHT

    if not text:
        logger.warning("Insight generation returned an empty response")
        return FALLBACK_INSIGHT
    return text
