"""Tests for the queue worker against a real app through the HTTP client."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from cqueue.v1.jobs.models import JobStatus, JobType
from cqueue_cli.client.base import APIClient
from cqueue_cli.client.endpoints import CQueueClient, QueueEmpty
from cqueue_cli.worker import QueueWorker


@pytest.fixture
def api_client(client: TestClient) -> CQueueClient:
    """CQueueClient whose transport is the in-process test client."""
    return CQueueClient(api=APIClient(base_url="http://testserver", client=client))


def test_client_round_trip(api_client, repository):
    created = api_client.enqueue("TIME_CRITICAL")
    job = api_client.dequeue()

    assert job == {"ID": created["ID"], "Type": "TIME_CRITICAL", "Status": "IN_PROGRESS"}
    assert api_client.conclude(job["ID"])["Status"] == "CONCLUDED"
    assert api_client.stats()["Concluded"] == 1


def test_client_dequeue_empty_raises_queue_empty(api_client):
    with pytest.raises(QueueEmpty) as exc_info:
        api_client.dequeue()

    assert exc_info.value.status_code == 400


def test_worker_processes_all_jobs(api_client, repository):
    for _ in range(4):
        repository.enqueue(JobType.NOT_TIME_CRITICAL)
    sleep = Mock()

    worker = QueueWorker(api_client, sleep=sleep)
    processed = worker.run(once=True)

    assert processed == 4
    assert worker.concluded == 4
    assert repository.stats().concluded == 4
    sleep.assert_not_called()


def test_worker_respects_max_jobs(api_client, repository):
    for _ in range(5):
        repository.enqueue(JobType.TIME_CRITICAL)

    processed = QueueWorker(api_client, sleep=Mock()).run(max_jobs=2)

    assert processed == 2
    stats = repository.stats()
    assert (stats.queued, stats.concluded) == (3, 2)
    # LIFO: the two most recent jobs went first
    assert repository.find(5).status == JobStatus.CONCLUDED
    assert repository.find(4).status == JobStatus.CONCLUDED


def test_worker_cancels_job_when_handler_fails(api_client, repository):
    repository.enqueue(JobType.TIME_CRITICAL)

    def handler(job):
        raise RuntimeError("boom")

    worker = QueueWorker(api_client, handler=handler, sleep=Mock())
    worker.run(once=True)

    assert worker.cancelled == 1
    assert repository.find(1).status == JobStatus.CANCELLED


def test_worker_sleeps_on_empty_queue(api_client, repository):
    sleep = Mock()
    worker = QueueWorker(api_client, poll_interval=0.25, sleep=sleep)

    def stop_after_first_poll(_):
        worker.stop()

    sleep.side_effect = stop_after_first_poll
    processed = worker.run()

    assert processed == 0
    sleep.assert_called_once_with(0.25)
    assert worker.running is False


def test_worker_keeps_polling_when_job_cancelled_mid_run(api_client, repository):
    for _ in range(3):
        repository.enqueue(JobType.TIME_CRITICAL)
    results = []

    def handler(job):
        if job["ID"] == 3:
            repository.cancel(3)

    worker = QueueWorker(api_client, handler=handler, sleep=Mock())
    original = worker.process_one

    def record():
        job = original()
        results.append(job)
        return job

    worker.process_one = record
    processed = worker.run(once=True)

    assert processed == 3
    assert worker.concluded == 2
    assert worker.cancelled == 0
    assert results[0] == {"ID": 3, "Type": "TIME_CRITICAL", "Status": "CANCELLED"}
    stats = repository.stats()
    assert (stats.queued, stats.concluded, stats.cancelled) == (0, 2, 1)


def test_worker_counts_only_cancels_it_performed(api_client, repository):
    repository.enqueue(JobType.NOT_TIME_CRITICAL)

    def handler(job):
        repository.cancel(job["ID"])
        raise RuntimeError("boom")

    worker = QueueWorker(api_client, handler=handler, sleep=Mock())
    processed = worker.run(once=True)

    assert processed == 1
    assert worker.cancelled == 0
    assert worker.concluded == 0
    assert repository.find(1).status == JobStatus.CANCELLED
