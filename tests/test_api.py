# File: tests/test_api.py
"""
Smoke tests for the REST API using FastAPI's TestClient.
"""

import numpy as np
from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_health_check():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    print("✓ Health check")


def test_list_sections():
    response = client.get("/api/sections", params={"family": "UB"})
    assert response.status_code == 200
    designations = response.json()["designations"]
    assert "250UB31.4" in designations
    assert all("UB" in d for d in designations)
    print(f"✓ {len(designations)} UB sections listed")


def test_capacity_endpoint():
    response = client.post("/api/capacity", json={"designation": "250UB31.4", "members": 1})
    assert response.status_code == 200
    data = response.json()
    assert np.isclose(data["phi_m"], 95.58)
    assert np.isclose(data["phi_v"], 249.0264)

    # Member count above the maximum is clamped to 4
    response = client.post("/api/capacity", json={"designation": "250UB31.4", "members": 10})
    assert np.isclose(response.json()["phi_m"], 4 * 95.58)
    print("✓ Capacity endpoint")


def test_capacity_non_finite_member_count():
    """
    A non-finite member count is clamped, not turned into a server error.
    """
    response = client.post(
        "/api/capacity",
        content='{"designation": "250UB31.4", "members": Infinity}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert np.isclose(response.json()["phi_m"], 95.58)
    print("✓ Non-finite member count clamped")


def test_capacity_unknown_section():
    response = client.post("/api/capacity", json={"designation": "999UB999"})
    assert response.status_code == 404
    print("✓ Unknown section returns 404")


def test_analyze_endpoint():
    """
    Full design pass over HTTP with loads given as plain JSON.
    """
    payload = {
        "span": 4.0,
        "members": 1,
        "usage": "Normal",
        "designation": "250UB31.4",
        "udl_loads": [{"id": "u1", "start": 0.0, "finish": 4.0, "dead": 2.0, "live": 0.0}],
        "point_loads": [],
        "moments": [],
        "full_udl": {"tributary_width": 0.0},
    }
    response = client.post("/api/analyze", json=payload)
    assert response.status_code == 200
    data = response.json()

    assert data["section"]["designation"] == "250UB31.4"
    assert data["analysis"]["controlling_moment_case"] == "1.35G"
    assert np.isclose(data["analysis"]["max_moment"], 1.35 * 2.0 * 16 / 8)
    assert len(data["analysis"]["combination_actions"]) == 3
    assert data["checks"]["checks"]["moment"]["status"] == "PASS"
    print("✓ Analyze endpoint")


def test_analyze_tolerates_malformed_loads():
    """
    Malformed load collections are ignored and the span is clamped rather
    than the request being rejected.
    """
    payload = {
        "span": -5,
        "designation": "250UB31.4",
        "udl_loads": "oops",
        "point_loads": [{"location": "x"}],
    }
    response = client.post("/api/analyze", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["span"] == 0.01
    assert data["analysis"]["max_moment"] == 0.0
    assert data["analysis"]["controlling_moment_case"] is None
    print("✓ Malformed loads tolerated")


def test_analyze_without_section():
    response = client.post("/api/analyze", json={"span": 3.0})
    assert response.status_code == 200
    data = response.json()
    assert data["analysis"] is None
    assert data["checks"] is None
    assert data["capacity"]["moment_details"] == "No section selected"
    print("✓ Pending result without a section")
