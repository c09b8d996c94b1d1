"""Ping utility used by the API health-check."""

from compound_simulator.core.insight import insight_enabled
from compound_simulator.schemas.ping import PingResponse


def get_ping_status() -> PingResponse:
    """Report liveness and whether the insight button can be offered."""
    return PingResponse(message="pong", insightEnabled=insight_enabled())
