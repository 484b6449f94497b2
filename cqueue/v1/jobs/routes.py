"""
Job queue API endpoints.

Handlers are plain functions: FastAPI runs them in its thread pool and the
repository serialises access with its own locks. Repository errors propagate
to the application exception handler, which maps them to status codes.
"""

import time

from fastapi import APIRouter, Depends, Request

from cqueue.v1.jobs.models import Job
from cqueue.v1.jobs.repository import InMemoryJobRepository
from cqueue.v1.jobs.schemas import (
    JobEnqueueRequest,
    JobEnqueueResponse,
    JobResponse,
    JobStatsResponse,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])


def get_job_repository(request: Request) -> InMemoryJobRepository:
    """Dependency returning the repository attached to the running app."""
    return request.app.state.job_repository


JobRepositoryDep = Depends(get_job_repository)


def _job_response(job: Job) -> JobResponse:
    return JobResponse(id=job.id, type=job.type, status=job.status)


@router.put("/enqueue", response_model=JobEnqueueResponse)
def enqueue_job(
    job_request: JobEnqueueRequest,
    repository: InMemoryJobRepository = JobRepositoryDep,
) -> JobEnqueueResponse:
    """Enqueue a new job."""
    job = repository.enqueue(job_request.type)
    return JobEnqueueResponse(id=job.id)


@router.post("/dequeue", response_model=JobResponse)
def dequeue_job(repository: InMemoryJobRepository = JobRepositoryDep) -> JobResponse:
    """Take the next pending job and mark it in progress."""
    return _job_response(repository.dequeue())


@router.post("/conclude/{job_id}", response_model=JobResponse)
def conclude_job(
    job_id: int, repository: InMemoryJobRepository = JobRepositoryDep
) -> JobResponse:
    """Mark an in-progress job as concluded."""
    return _job_response(repository.conclude(job_id))


@router.post("/cancel/{job_id}", response_model=JobResponse)
def cancel_job(
    job_id: int, repository: InMemoryJobRepository = JobRepositoryDep
) -> JobResponse:
    """Cancel a queued or in-progress job."""
    return _job_response(repository.cancel(job_id))


@router.get("/stats", response_model=JobStatsResponse)
def get_job_stats(
    request: Request, repository: InMemoryJobRepository = JobRepositoryDep
) -> JobStatsResponse:
    """Get job counts by status and process uptime."""
    stats = repository.stats()
    uptime_millis = int((time.monotonic() - request.app.state.started_at) * 1000)

    return JobStatsResponse(
        queued=stats.queued,
        in_progress=stats.in_progress,
        concluded=stats.concluded,
        cancelled=stats.cancelled,
        uptime_millis=uptime_millis,
    )


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: int, repository: InMemoryJobRepository = JobRepositoryDep
) -> JobResponse:
    """Get a specific job by ID."""
    return _job_response(repository.find(job_id))
