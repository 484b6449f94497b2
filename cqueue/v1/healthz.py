from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from cqueue.config.settings import Settings, SettingsDep
from cqueue.v1.core.exceptions import create_success_response
from cqueue.v1.jobs.repository import InMemoryJobRepository
from cqueue.v1.jobs.routes import JobRepositoryDep

router = APIRouter()


class QueueHealth(BaseModel):
    """Job queue status."""

    pending: int
    in_progress: int
    uptime_seconds: int


class HealthResponse(BaseModel):
    """Health response with queue status."""

    ok: bool
    version: str
    environment: str
    timestamp: str
    queue: QueueHealth


@router.get("/healthz", response_model=dict)
def health_check(
    request: Request,
    settings: Settings = SettingsDep,
    repository: InMemoryJobRepository = JobRepositoryDep,
):
    """Health check endpoint with queue depth and uptime.

    Plain def so the repository locks are taken on the threadpool.
    """

    started_at = request.app.state.started_at_wall
    health = HealthResponse(
        ok=True,
        version=settings.version,
        environment=settings.environment,
        timestamp=datetime.now(UTC).isoformat(),
        queue=QueueHealth(
            pending=repository.pending_count(),
            in_progress=repository.stats().in_progress,
            uptime_seconds=int((datetime.now(UTC) - started_at).total_seconds()),
        ),
    )

    return create_success_response(
        data=health.model_dump(), request_id=request.state.request_id
    )
