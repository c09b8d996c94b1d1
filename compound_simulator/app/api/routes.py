"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from compound_simulator.core.dashboard import chart_points, schedule_rows
from compound_simulator.core.insight import get_financial_insight
from compound_simulator.core.ping import get_ping_status
from compound_simulator.core.projection import monthly_rate, project, total_months
from compound_simulator.core.summary import summarize
from compound_simulator.schemas.simulation import (
    InsightResponse,
    SimulationRequest,
    SimulationResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class BadPayload(Exception):
    """Request body is not a JSON object."""


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False, include_input=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(BadPayload)
def _handle_bad_payload(exc: BadPayload):
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


def _json_response(model: BaseModel) -> Response:
    # non-finite floats are written as null
    return current_app.response_class(model.model_dump_json(), mimetype="application/json")


def _read_simulation_request() -> SimulationRequest:
    raw_payload: Optional[Dict[str, Any]] = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        raise BadPayload("request body must be a JSON object")
    return SimulationRequest.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping_status().model_dump())


@api_bp.get("/simulation/defaults")
def simulation_defaults() -> Any:
    """Initial values of the simulation form."""
    return jsonify(SimulationRequest().model_dump(mode="json"))


@api_bp.post("/simulation")
def simulation() -> Any:
    """Run the projection and return everything the dashboard renders."""
    inputs = _read_simulation_request().to_inputs()
    results = project(inputs)
    summary = summarize(results)
    logger.debug("Projected %d months for %s", len(results) - 1, inputs)

    response = SimulationResponse(
        inputs=inputs,
        totalMonths=total_months(inputs),
        monthlyRate=monthly_rate(inputs),
        results=results,
        summary=summary,
        chart=chart_points(results, current_app.config["CHART_MAX_POINTS"]),
        table=schedule_rows(results),
    )
    return _json_response(response)


@api_bp.post("/simulation/insight")
def simulation_insight() -> Any:
    """Summarise the projection and ask the LLM for tips about it."""
    inputs = _read_simulation_request().to_inputs()
    summary = summarize(project(inputs))
    insight = get_financial_insight(summary, inputs, client=current_app.config.get("INSIGHT_CLIENT"))

    response = InsightResponse(summary=summary, insight=insight)
    return _json_response(response)
