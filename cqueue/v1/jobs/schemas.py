"""
Job API Pydantic schemas.

Field names on the wire are capitalised (``ID``, ``Type``, ``Status``); the
Python attributes keep snake_case and map through aliases.
"""

from pydantic import BaseModel, ConfigDict, Field

from cqueue.v1.jobs.models import JobStatus, JobType


class JobEnqueueRequest(BaseModel):
    """Schema for enqueueing a job."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: JobType = Field(..., alias="Type", description="Job type")


class JobEnqueueResponse(BaseModel):
    """Schema for job enqueue response."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID")


class JobResponse(BaseModel):
    """Schema for job API responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID")
    type: JobType = Field(..., alias="Type")
    status: JobStatus = Field(..., alias="Status")


class JobStatsResponse(BaseModel):
    """Schema for job statistics."""

    model_config = ConfigDict(populate_by_name=True)

    queued: int = Field(..., alias="Queued")
    in_progress: int = Field(..., alias="InProgress")
    concluded: int = Field(..., alias="Concluded")
    cancelled: int = Field(..., alias="Cancelled")
    uptime_millis: int = Field(..., alias="UptimeMillis")
