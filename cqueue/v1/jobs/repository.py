"""
Thread-safe in-memory job repository.

The repository owns two structures:
- the index, mapping job ID to the authoritative job record
- the pending queue, the IDs of jobs waiting to be dequeued

Each structure has its own lock. Operations touching both always acquire the
queue lock first and the index lock second, and release neither until the
operation is complete, so no caller observes a half-applied transition.
"""

import logging
from threading import Lock
from typing import NamedTuple

from cqueue.v1.jobs.exceptions import (
    InvalidStatusError,
    JobNotFoundError,
    QueueEmptyError,
    UnknownJobError,
)
from cqueue.v1.jobs.models import Job, JobStatus, JobType

logger = logging.getLogger(__name__)


class JobStats(NamedTuple):
    """Job counts by status."""

    queued: int
    in_progress: int
    concluded: int
    cancelled: int

    @property
    def total(self) -> int:
        return self.queued + self.in_progress + self.concluded + self.cancelled


class InMemoryJobRepository:
    """
    Job store shared by all request handlers of one process.

    Records are never evicted, so every ID handed out stays resolvable for the
    lifetime of the process. Callers only ever receive copies of the records.
    """

    def __init__(self) -> None:
        self._jobs: dict[int, Job] = {}
        self._queue: list[int] = []
        self._last_id = 0
        self._jobs_lock = Lock()
        self._queue_lock = Lock()

    def enqueue(self, job_type: JobType) -> Job:
        """Create a QUEUED job and push it onto the pending queue."""
        with self._queue_lock, self._jobs_lock:
            self._last_id += 1
            job = Job(id=self._last_id, type=JobType(job_type))
            self._jobs[job.id] = job
            self._queue.append(job.id)
            snapshot = job.snapshot()

        logger.info(
            "Job enqueued",
            extra={"job_id": snapshot.id, "type": snapshot.type.value},
        )
        return snapshot

    def dequeue(self) -> Job:
        """
        Move the most recently enqueued pending job to IN_PROGRESS.

        Pending jobs are taken last-in-first-out.

        Raises:
            QueueEmptyError: no job is waiting
            UnknownJobError: the queue references a job that is not QUEUED
        """
        with self._queue_lock, self._jobs_lock:
            if not self._queue:
                raise QueueEmptyError()

            job_id = self._queue[-1]
            job = self._jobs.get(job_id)
            if job is None or job.status != JobStatus.QUEUED:
                raise UnknownJobError(job_id)

            self._queue.pop()
            job.status = JobStatus.IN_PROGRESS
            snapshot = job.snapshot()

        logger.info("Job dequeued", extra={"job_id": snapshot.id})
        return snapshot

    def conclude(self, job_id: int) -> Job:
        """
        Move an IN_PROGRESS job to CONCLUDED.

        Raises:
            JobNotFoundError: unknown job ID
            InvalidStatusError: the job is not IN_PROGRESS
        """
        # An IN_PROGRESS job is never in the pending queue, so the index lock
        # alone covers this transition.
        with self._jobs_lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(job_id)
            if not job.can_conclude():
                raise InvalidStatusError(job_id)

            job.status = JobStatus.CONCLUDED
            snapshot = job.snapshot()

        logger.info("Job concluded", extra={"job_id": job_id})
        return snapshot

    def cancel(self, job_id: int) -> Job:
        """
        Move a QUEUED or IN_PROGRESS job to CANCELLED.

        The job is dropped from the pending queue if it is still waiting there.

        Raises:
            JobNotFoundError: unknown job ID
            InvalidStatusError: the job already reached a terminal status
        """
        with self._queue_lock, self._jobs_lock:
            self._purge_cancelled()

            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(job_id)
            if not job.can_cancel():
                raise InvalidStatusError(job_id)

            if job.status == JobStatus.QUEUED:
                self._queue.remove(job_id)
            job.status = JobStatus.CANCELLED
            snapshot = job.snapshot()

        logger.info("Job cancelled", extra={"job_id": job_id})
        return snapshot

    def find(self, job_id: int) -> Job:
        """
        Return a copy of the job record.

        Raises:
            JobNotFoundError: unknown job ID
        """
        with self._jobs_lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFoundError(job_id)
            return job.snapshot()

    def stats(self) -> JobStats:
        """Count jobs in the index by status."""
        counts = dict.fromkeys(JobStatus, 0)
        with self._jobs_lock:
            for job in self._jobs.values():
                counts[job.status] += 1

        return JobStats(
            queued=counts[JobStatus.QUEUED],
            in_progress=counts[JobStatus.IN_PROGRESS],
            concluded=counts[JobStatus.CONCLUDED],
            cancelled=counts[JobStatus.CANCELLED],
        )

    def pending_count(self) -> int:
        """Number of jobs waiting in the pending queue."""
        with self._queue_lock:
            return len(self._queue)

    def _purge_cancelled(self) -> None:
        """Drop queue entries whose job is already CANCELLED.

        Callers must hold both locks.
        """
        stale = {
            job_id
            for job_id in self._queue
            if self._jobs[job_id].status == JobStatus.CANCELLED
        }
        if not stale:
            return

        self._queue[:] = [job_id for job_id in self._queue if job_id not in stale]
        logger.warning("Dropped stale queue entries", extra={"job_ids": sorted(stale)})
