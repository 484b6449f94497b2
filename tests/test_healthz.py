import inspect

from fastapi.testclient import TestClient

from cqueue.v1.healthz import health_check

from cqueue.v1.jobs.models import JobType


def test_health_check_success(client: TestClient):
    """Test health check endpoint returns correct format."""
    response = client.get("/healthz")

    assert response.status_code == 200

    data = response.json()
    assert data["ok"] is True
    assert "data" in data

    health_data = data["data"]
    assert health_data["ok"] is True
    assert health_data["version"] == "0.1.0"
    assert health_data["environment"] == "development"


def test_health_check_response_structure(client: TestClient):
    """Test health check response envelope structure."""
    response = client.get("/healthz")

    data = response.json()

    required_keys = ["ok", "data", "message", "request_id"]
    for key in required_keys:
        assert key in data

    assert response.headers["X-Request-ID"] == data["request_id"]


def test_health_check_reports_queue_depth(client: TestClient, repository):
    """Test health check exposes pending and in-progress counts."""
    for _ in range(3):
        repository.enqueue(JobType.TIME_CRITICAL)
    repository.dequeue()

    queue = client.get("/healthz").json()["data"]["queue"]

    assert queue["pending"] == 2
    assert queue["in_progress"] == 1
    assert queue["uptime_seconds"] >= 0


def test_health_check_runs_in_threadpool():
    """Queue counts take repository locks, so the handler must not run on the event loop."""
    assert not inspect.iscoroutinefunction(health_check)
