"""API Endpoint Wrappers - Type-safe API calls"""

from typing import Any

from .base import APIClient, CQueueError
from ..utils.config_manager import config

__all__ = ["CQueueClient", "CQueueError", "QueueEmpty"]


class QueueEmpty(CQueueError):
    """Raised by dequeue when no job is waiting"""


class CQueueClient:
    """High-level client with typed endpoint methods"""

    def __init__(self, base_url: str | None = None, api: APIClient | None = None):
        if api is not None:
            self.api = api
            return

        # Use config values if not provided
        api_config = config.load_config().get("api", {})
        final_base_url = base_url or api_config.get(
            "base_url", "http://localhost:3000"
        )

        self.api = APIClient(
            base_url=final_base_url,
            timeout=int(api_config.get("timeout", 30)),
        )

    def __enter__(self):
        self.api.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.api.__exit__(exc_type, exc_val, exc_tb)

    # Health Check
    def health_check(self) -> dict[str, Any]:
        """Check API health status"""
        return self.api.get("/healthz")

    # Job Endpoints
    def enqueue(self, job_type: str) -> dict[str, Any]:
        """Submit a job, returns {"ID": ...}"""
        return self.api.put("/jobs/enqueue", json={"Type": job_type})

    def dequeue(self) -> dict[str, Any]:
        """Take the next pending job"""
        try:
            return self.api.post("/jobs/dequeue")
        except CQueueError as e:
            if e.status_code == 400:
                raise QueueEmpty(str(e), status_code=400) from None
            raise

    def conclude(self, job_id: int) -> dict[str, Any]:
        """Mark an in-progress job as concluded"""
        return self.api.post(f"/jobs/conclude/{job_id}")

    def cancel(self, job_id: int) -> dict[str, Any]:
        """Cancel a queued or in-progress job"""
        return self.api.post(f"/jobs/cancel/{job_id}")

    def get_job(self, job_id: int) -> dict[str, Any]:
        """Get specific job by ID"""
        return self.api.get(f"/jobs/{job_id}")

    def stats(self) -> dict[str, Any]:
        """Get job counts by status"""
        return self.api.get("/jobs/stats")
