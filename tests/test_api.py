import pytest
from fastapi.testclient import TestClient
import main


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", None)
    return TestClient(main.app)


def record(name, start, duration, min_duration=None, max_duration=None, flexible=True, locked=False, **extra):
    rec = {
        "name": name,
        "start": start,
        "duration": duration,
        "minDuration": duration if min_duration is None else min_duration,
        "maxDuration": duration if max_duration is None else max_duration,
        "flexible": flexible,
        "locked": locked,
    }
    rec.update(extra)
    return rec


def test_healthcheck(client):
    response = client.get("/api/health/check")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_validate_reports_day_boundary(client):
    body = {"activities": [record("Assembly", 990, 20, flexible=False)], "dayStart": 480, "dayEnd": 1000}

    response = client.post("/api/timetable/validate", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert data["orderValid"] is True
    assert [v["type"] for v in data["violations"]] == ["dayBoundary"]
    assert data["violations"][0]["activity"]["name"] == "Assembly"


def test_propagate_shrinks_before_shifting(client):
    body = {
        "activities": [record("A", 0, 60, 30, 90), record("B", 50, 60, 30, 90)],
        "dayStart": 0,
        "dayEnd": 1440,
    }

    response = client.post("/api/timetable/propagate", json=body)

    assert response.status_code == 200
    acts = response.json()["activities"]
    assert [(a["start"], a["duration"]) for a in acts] == [(0, 60), (60, 50)]


def test_solve(client):
    body = {
        "activities": [record("A", 480, 60, 30, 90), record("B", 530, 60, 30, 90, priority=3)],
        "dayStart": 480,
        "dayEnd": 720,
    }

    response = client.post("/api/timetable/solve", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "solved"
    assert data["score"] > 0
    assert data["truncated"] is False
    assert len(data["activities"]) == 2


def test_solve_locks_finished_activities(client):
    body = {
        "activities": [record("A", 480, 60, 30, 90), record("B", 540, 60, 30, 90)],
        "dayStart": 480,
        "dayEnd": 1000,
        "now": 700,
    }

    data = client.post("/api/timetable/solve", json=body).json()

    assert data["status"] == "nothing_to_adjust"
    assert all(a["locked"] for a in data["activities"])


def test_unknown_field_is_rejected(client):
    body = {"activities": [record("A", 480, 60, colour="red")]}
    response = client.post("/api/timetable/validate", json=body)
    assert response.status_code == 422


def test_invalid_day_bounds(client):
    body = {"activities": [record("A", 480, 60)], "dayStart": 1000, "dayEnd": 480}
    response = client.post("/api/timetable/solve", json=body)
    assert response.status_code == 400


def test_api_key_is_enforced(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", "secret")
    client = TestClient(main.app)
    body = {"activities": [record("A", 480, 60)]}

    assert client.post("/api/timetable/validate", json=body).status_code == 401
    assert client.post("/api/timetable/validate", json=body, headers={"x-api-key": "secret"}).status_code == 200
    assert client.get("/api/health/check").status_code == 200


def test_docs_stay_public_when_key_is_set(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", "secret")
    client = TestClient(main.app)

    assert client.get("/openapi.json").status_code == 200
    assert "/api/health/check" in main.PUBLIC_PATHS
    assert "/api/timetable/solve" not in main.PUBLIC_PATHS
