"""
End-to-end tests through the FastAPI application, covering routing, wire format and HTTP error codes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import main as app_main
from config import API_PREFIX


pytestmark = pytest.mark.usefixtures("default_settings")


@pytest.fixture
def client():
    with TestClient(app_main.app) as c:
        yield c


def test_health(client):
    resp = client.get(f"{API_PREFIX}/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["defaults"]["windowSize"] == 10
    assert body["defaults"]["threshold"] == 2.0


def test_analyze_time_series_wire_format(client):
    resp = client.post(
        f"{API_PREFIX}/analyze-time-series",
        json={"data": [1, 1, 1, 1, 1, 1, 1, 1, 1, 100], "windowSize": 3},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    analysis = body["analysis"]
    assert set(analysis) == {"trend", "seasonality", "anomalies", "predictions"}
    assert analysis["anomalies"][0]["index"] == 9
    assert "zScore" in analysis["anomalies"][0]
    assert analysis["predictions"][:2] == [1.0, 1.0]


def test_analyze_is_byte_identical_across_calls(client):
    payload = {"sequence": [3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0, 5.0, 3.0, 5.0], "windowSize": 4}
    first = client.post(f"{API_PREFIX}/analyze-time-series", json=payload)
    second = client.post(f"{API_PREFIX}/analyze-time-series", json=payload)
    assert first.status_code == 200
    assert first.content == second.content


def test_invalid_window_is_400(client):
    resp = client.post(f"{API_PREFIX}/analyze-time-series", json={"sequence": [1, 2, 3, 4], "windowSize": 4})
    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "InvalidInput"


def test_default_window_larger_than_series_is_400(client):
    resp = client.post(f"{API_PREFIX}/analyze-time-series", json={"sequence": [1, 2, 3, 4, 5]})
    assert resp.status_code == 400


def test_constant_series_is_422_with_kind(client):
    resp = client.post(f"{API_PREFIX}/analyze-time-series", json={"sequence": [5] * 8, "windowSize": 3})
    assert resp.status_code == 422
    assert resp.json()["detail"] == {
        "kind": "DegenerateSeries",
        "message": "seasonality is undefined for a constant series",
    }


def test_non_numeric_body_rejected_by_schema(client):
    resp = client.post(f"{API_PREFIX}/analyze-time-series", json={"sequence": ["a", 2, 3, 4]})
    assert resp.status_code == 422
    assert isinstance(resp.json()["detail"], list)


def test_procedure_endpoints(client):
    seq = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert client.post(f"{API_PREFIX}/trend", json={"sequence": seq}).json()["trend"] == pytest.approx(1.0)
    assert client.post(f"{API_PREFIX}/forecast", json={"sequence": seq, "windowSize": 3}).json()["predictions"] == [
        2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0,
    ]
    assert client.post(f"{API_PREFIX}/anomalies", json={"sequence": seq}).json()["anomalies"] == []
    assert len(client.post(f"{API_PREFIX}/seasonality", json={"sequence": seq}).json()["seasonality"]) == 4


def test_overflowing_values_are_400_not_null(client):
    resp = client.post(
        f"{API_PREFIX}/analyze-time-series",
        json={"sequence": [1e308, 1e308, -1e308, -1e308, 1e308, 1e308], "windowSize": 2},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "InvalidInput"


def test_integer_too_large_for_float_is_400(client):
    resp = client.post(f"{API_PREFIX}/trend", json={"sequence": [10**400, 1, 2]})
    assert resp.status_code == 400
    assert resp.json()["detail"]["kind"] == "InvalidInput"
