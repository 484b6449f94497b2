import pytest

from cqueue.v1.core.exceptions import CQueueException
from cqueue.v1.jobs.exceptions import (
    InvalidStatusError,
    JobNotFoundError,
    QueueEmptyError,
    UnknownJobError,
)


@pytest.mark.parametrize(
    "error, status_code, benign",
    [
        (JobNotFoundError(4), 404, True),
        (QueueEmptyError(), 400, True),
        (InvalidStatusError(4), 409, False),
        (UnknownJobError(), 500, False),
    ],
)
def test_job_errors_share_the_core_base(error, status_code, benign):
    assert isinstance(error, CQueueException)
    assert error.status_code == status_code
    assert error.benign is benign
