from flask.testing import FlaskClient

from compound_simulator.config import settings


def test_ping_returns_pong(client: FlaskClient, monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "insightEnabled": False}


def test_ping_reports_insight_when_key_configured(client: FlaskClient, monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json["insightEnabled"] is True
