"""
Job model for the in-memory queue.
"""

from dataclasses import dataclass, replace
from enum import Enum


class JobType(str, Enum):
    """Job type enumeration. Informational only, it does not affect ordering."""

    TIME_CRITICAL = "TIME_CRITICAL"
    NOT_TIME_CRITICAL = "NOT_TIME_CRITICAL"


class JobStatus(str, Enum):
    """Job status enumeration."""

    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    CONCLUDED = "CONCLUDED"
    CANCELLED = "CANCELLED"


@dataclass
class Job:
    """
    A unit of work tracked by the repository.

    Lifecycle:
    - QUEUED on enqueue
    - IN_PROGRESS on dequeue
    - CONCLUDED on conclude (from IN_PROGRESS only)
    - CANCELLED on cancel (from QUEUED or IN_PROGRESS)
    """

    id: int
    type: JobType
    status: JobStatus = JobStatus.QUEUED

    def is_active(self) -> bool:
        """Check if job is in an active state (queued, in progress)."""
        return self.status in (JobStatus.QUEUED, JobStatus.IN_PROGRESS)

    def can_conclude(self) -> bool:
        return self.status == JobStatus.IN_PROGRESS

    def can_cancel(self) -> bool:
        return self.is_active()

    def snapshot(self) -> "Job":
        """Return a detached copy safe to hand out to callers."""
        return replace(self)
