from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from taskplanner.core.jwt import create_access_token
from taskplanner.dependencies.auth import get_current_user
from taskplanner.dependencies.services import get_task_service
from taskplanner.main import app

from conftest import NOW

HOUR = timedelta(hours=1)


def _iso(dt):
    return dt.isoformat()


@pytest.fixture
def client(service, owner):
    app.dependency_overrides[get_task_service] = lambda: service
    app.dependency_overrides[get_current_user] = lambda: owner.user_id
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _body(**kw):
    body = {
        "name": "write essay",
        "priority": "High",
        "startDate": _iso(NOW + HOUR),
        "dueDate": _iso(NOW + 5 * HOUR),
    }
    body.update(kw)
    return body


def test_create_returns_camel_case_record(client):
    resp = client.post("/tasks/", json=_body(estimatedTime=99))
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "write essay"
    assert data["estimatedTime"] == 4
    assert data["status"] == "Todo"


def test_duplicate_name_is_409(client):
    assert client.post("/tasks/", json=_body()).status_code == 200
    resp = client.post("/tasks/", json=_body())
    assert resp.status_code == 409
    assert resp.json() == {
        "status": "ERR",
        "kind": "DuplicateName",
        "message": "Task with the same name already exists for this user.",
    }


def test_validation_errors_are_400_with_kind(client):
    resp = client.post("/tasks/", json=_body(dueDate=None))
    assert resp.status_code == 400
    assert resp.json()["kind"] == "MissingPairedDate"

    resp = client.post("/tasks/", json=_body(status="Todo", startDate=_iso(NOW - HOUR)))
    assert resp.status_code == 400
    assert resp.json()["kind"] == "InvalidTransition"


def test_create_without_status_and_past_start(client):
    resp = client.post("/tasks/", json=_body(name="already going", startDate=_iso(NOW - HOUR)))
    assert resp.status_code == 200
    assert resp.json()["status"] == "Todo"


def test_timezone_aware_dates_are_normalized(client):
    resp = client.post("/tasks/", json=_body(startDate="2026-03-11T15:00:00+02:00", dueDate="2026-03-11T16:00:00Z"))
    assert resp.status_code == 200
    assert resp.json()["startDate"] == "2026-03-11T13:00:00"
    assert resp.json()["estimatedTime"] == 3


def test_update_get_delete_roundtrip(client):
    task_id = client.post("/tasks/", json=_body()).json()["taskId"]

    resp = client.patch(f"/tasks/{task_id}", json={"status": "In Progress", "startDate": _iso(NOW)})
    assert resp.status_code == 200
    assert resp.json()["status"] == "In Progress"

    assert client.get(f"/tasks/{task_id}").json()["startDate"] == _iso(NOW)

    assert client.delete(f"/tasks/{task_id}").json()["status"] == "SUCCESS"
    resp = client.get(f"/tasks/{task_id}")
    assert resp.status_code == 404
    assert resp.json()["kind"] == "NotFound"


def test_list_with_query_params(client):
    client.post("/tasks/", json=_body(name="b", priority="Low"))
    client.post("/tasks/", json=_body(name="a", priority="High"))
    resp = client.get("/tasks/", params={"sortBy": "name"})
    assert [t["name"] for t in resp.json()] == ["a", "b"]
    resp = client.get("/tasks/", params={"priority": "Low"})
    assert [t["name"] for t in resp.json()] == ["b"]


def test_reports(client, make_task, owner):
    monday = NOW.replace(hour=0) - timedelta(days=2)
    make_task(owner.user_id, "x", status="Completed", start=monday, due=monday + timedelta(days=2), estimated=12)
    make_task(owner.user_id, "y", status="Todo", estimated=4)

    daily = client.get("/tasks/reports/daily-time", params={"startDate": _iso(NOW)}).json()
    assert daily["labels"] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert daily["datasets"][0]["data"] == [4, 4, 4, 0, 0, 0, 0]

    status = client.get("/tasks/reports/status").json()
    assert status["labels"] == ["Todo", "In Progress", "Completed", "Expired"]
    assert status["datasets"][0]["data"] == [1, 0, 1, 0]

    dash = client.get("/tasks/reports/dashboard").json()
    assert dash == {
        "totalTimeSpent": 12,
        "totalEstimatedTime": 16,
        "estimatedTimePercentage": 50.0,
        "taskCount": 2,
    }


def test_expire_endpoint(client, make_task, owner):
    make_task(owner.user_id, "late", start=NOW - 3 * HOUR, due=NOW - HOUR)
    first = client.post("/tasks/expire").json()
    assert first["modifiedCount"] == 1
    assert client.post("/tasks/expire").json()["modifiedCount"] == 0


def test_requires_bearer_token(service, owner):
    app.dependency_overrides[get_task_service] = lambda: service
    try:
        with TestClient(app) as c:
            assert c.get("/tasks/").status_code == 401
            token = create_access_token(str(owner.user_id))
            resp = c.get("/tasks/", headers={"Authorization": f"Bearer {token}"})
            assert resp.status_code == 200
            assert resp.json() == []
    finally:
        app.dependency_overrides.clear()
