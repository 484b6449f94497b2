"""
Errors raised by the job repository.

None of them are retried by the repository; a failed operation leaves the
index and the pending queue untouched.
"""

from fastapi import status

from cqueue.v1.core.exceptions import CQueueException


class JobRepositoryError(CQueueException):
    """Base class for job repository failures."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        job_id: int | None = None,
    ):
        self.job_id = job_id
        details = {"job_id": job_id} if job_id is not None else None
        super().__init__(message, status_code, details)


class JobNotFoundError(JobRepositoryError):
    """Raised when no job with the given ID exists."""

    benign = True

    def __init__(self, job_id: int):
        super().__init__(
            f"Unable to find a job with ID: `{job_id}`",
            status.HTTP_404_NOT_FOUND,
            job_id,
        )


class QueueEmptyError(JobRepositoryError):
    """Raised when there is no pending job to dequeue."""

    benign = True

    def __init__(self):
        super().__init__(
            "The job repository queue is empty", status.HTTP_400_BAD_REQUEST
        )


class InvalidStatusError(JobRepositoryError):
    """Raised when the requested transition is illegal for the job's status."""

    def __init__(self, job_id: int):
        super().__init__(
            "Trying to transition to an invalid job status",
            status.HTTP_409_CONFLICT,
            job_id,
        )


class UnknownJobError(JobRepositoryError):
    """Raised when the index and the pending queue disagree."""

    def __init__(self, job_id: int | None = None):
        super().__init__("Unknown job repository error", job_id=job_id)
