"""
Polling worker that drains the job queue over HTTP.
"""

import logging
import os
import socket
import time
from collections.abc import Callable
from typing import Any

from .client.endpoints import CQueueClient, CQueueError, QueueEmpty

logger = logging.getLogger(__name__)

JobHandler = Callable[[dict[str, Any]], None]


def noop_handler(job: dict[str, Any]) -> None:
    """Default handler: the queue only tracks status, so there is nothing to run."""


class QueueWorker:
    """
    Pulls jobs off the queue and reports them done.

    Each iteration dequeues one job, passes it to the handler and concludes
    it. If the handler raises, the job is cancelled instead. An empty queue
    makes the worker sleep for ``poll_interval`` seconds before polling again.
    """

    def __init__(
        self,
        client: CQueueClient,
        handler: JobHandler = noop_handler,
        poll_interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.handler = handler
        self.poll_interval = poll_interval
        self.sleep = sleep
        self.worker_id = f"{socket.gethostname()}-{os.getpid()}"
        self.running = False
        self.concluded = 0
        self.cancelled = 0

    def process_one(self) -> dict[str, Any] | None:
        """
        Process a single job.

        Returns the final job record, or None when the queue was empty.
        """
        try:
            job = self.client.dequeue()
        except QueueEmpty:
            return None

        job_id = job["ID"]
        logger.info(
            "Job claimed",
            extra={"worker_id": self.worker_id, "job_id": job_id, "type": job["Type"]},
        )

        try:
            self.handler(job)
        except Exception as e:
            logger.exception(
                "Job handler failed",
                extra={"worker_id": self.worker_id, "job_id": job_id},
            )
            try:
                cancelled = self.client.cancel(job_id)
            except CQueueError:
                # Someone else already moved the job to a terminal status
                logger.warning(
                    "Could not cancel failed job",
                    extra={"job_id": job_id, "error": str(e)},
                )
                return self._reconcile(job)
            self.cancelled += 1
            return cancelled

        try:
            concluded = self.client.conclude(job_id)
        except CQueueError as e:
            # Cancelled while the handler ran
            logger.warning(
                "Could not conclude job",
                extra={"worker_id": self.worker_id, "job_id": job_id, "error": str(e)},
            )
            return self._reconcile(job)
        self.concluded += 1
        return concluded

    def _reconcile(self, job: dict[str, Any]) -> dict[str, Any]:
        """Fetch the server's view of a job after a rejected transition."""
        try:
            return self.client.get_job(job["ID"])
        except CQueueError:
            return job

    def run(self, max_jobs: int | None = None, once: bool = False) -> int:
        """
        Run the poll loop.

        Stops after ``max_jobs`` processed jobs, after the first empty poll
        when ``once`` is set, or when ``stop()`` is called. Returns the number
        of jobs processed.
        """
        self.running = True
        processed = 0
        logger.info(
            "Starting worker",
            extra={"worker_id": self.worker_id, "poll_interval": self.poll_interval},
        )

        try:
            while self.running:
                if max_jobs is not None and processed >= max_jobs:
                    break

                job = self.process_one()
                if job is None:
                    if once:
                        break
                    self.sleep(self.poll_interval)
                    continue

                processed += 1
        finally:
            self.running = False
            logger.info(
                "Worker stopped",
                extra={"worker_id": self.worker_id, "processed": processed},
            )

        return processed

    def stop(self) -> None:
        """Ask the poll loop to exit after the current job."""
        self.running = False
